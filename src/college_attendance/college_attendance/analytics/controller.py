from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import short_day_label
from ..common.serialization import to_json_dict
from ..container import Container
from .engine import performance_band
from .export import XLSX_MIMETYPE
from .model import AnalyticsReport


def register(app: Flask, container: Container) -> None:
    service = container.analytics_service

    def _params() -> dict:
        window = request.args.get("window")
        return {
            "window_days": window if window else None,
            "department": request.args.get("department"),
        }

    def _daily_json(points) -> list[dict]:
        out = []
        for p in points:
            row = to_json_dict(p)
            row["label"] = short_day_label(p.work_date)
            out.append(row)
        return out

    def _rankings_json(rankings) -> list[dict]:
        out = []
        for r in rankings:
            row = to_json_dict(r)
            row["student"]["full_name"] = r.student.full_name
            row["band"] = performance_band(r.attendance_rate).value
            out.append(row)
        return out

    def _report_json(report: AnalyticsReport) -> dict:
        return {
            "window_days": report.window_days,
            "department": report.department,
            "daily": _daily_json(report.daily),
            "subjects": to_json_dict(report.subjects),
            "students": _rankings_json(report.students),
            "departments": to_json_dict(report.departments),
        }

    def _filename(report: AnalyticsReport, ext: str) -> str:
        dept = report.department.replace(" ", "_").lower()
        return f"attendance_report_{report.window_days}d_{dept}.{ext}"

    @app.route("/api/analytics", methods=["GET"], endpoint="api_analytics")
    def api_analytics():
        return jsonify(_report_json(service.analytics_report(**_params())))

    @app.route("/api/analytics/daily", methods=["GET"], endpoint="api_analytics_daily")
    def api_analytics_daily():
        return jsonify(_daily_json(service.daily_trend(**_params())))

    @app.route("/api/analytics/subjects", methods=["GET"], endpoint="api_analytics_subjects")
    def api_analytics_subjects():
        return jsonify(to_json_dict(service.subject_performance(**_params())))

    @app.route("/api/analytics/students", methods=["GET"], endpoint="api_analytics_students")
    def api_analytics_students():
        return jsonify(_rankings_json(service.student_performance(**_params())))

    @app.route("/api/analytics/departments", methods=["GET"], endpoint="api_analytics_departments")
    def api_analytics_departments():
        return jsonify(to_json_dict(service.department_comparison()))

    @app.route("/api/analytics/today", methods=["GET"], endpoint="api_analytics_today")
    def api_analytics_today():
        return jsonify(to_json_dict(service.today_stats()))

    @app.route("/api/analytics/weekly", methods=["GET"], endpoint="api_analytics_weekly")
    def api_analytics_weekly():
        return jsonify(to_json_dict(service.weekly_overview()))

    @app.route("/api/analytics/departments/today", methods=["GET"], endpoint="api_analytics_departments_today")
    def api_analytics_departments_today():
        return jsonify(to_json_dict(service.department_today()))

    @app.route("/api/analytics/report.csv", methods=["GET"], endpoint="api_analytics_report_csv")
    def api_analytics_report_csv():
        report = service.analytics_report(**_params())
        return app.response_class(
            container.report_exporter.to_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_filename(report, 'csv')}"},
        )

    @app.route("/api/analytics/report.xlsx", methods=["GET"], endpoint="api_analytics_report_xlsx")
    def api_analytics_report_xlsx():
        report = service.analytics_report(**_params())
        return send_file(
            container.report_exporter.to_excel(report),
            download_name=_filename(report, "xlsx"),
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )
