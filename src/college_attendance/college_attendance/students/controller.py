from __future__ import annotations

from flask import Flask, jsonify, request

from ..analytics.engine import performance_band
from ..common.serialization import to_json_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        search = request.args.get("search", "")
        department = request.args.get("department")
        year = request.args.get("year")

        students = container.student_service.search(search=search, department=department, year=year)
        summary = container.student_service.directory_summary(search=search, department=department, year=year)

        rows = []
        for s in students:
            totals = container.student_service.attendance_totals(s.student_id)
            row = to_json_dict(s)
            row["full_name"] = s.full_name
            row["attendance_rate"] = totals.attendance_rate
            row["band"] = performance_band(totals.attendance_rate).value
            rows.append(row)

        return jsonify({"students": rows, "summary": to_json_dict(summary)})

    @app.route("/api/students/<student_id>/attendance", methods=["GET"], endpoint="api_student_attendance")
    def api_student_attendance(student_id: str):
        totals = container.student_service.attendance_totals(student_id)
        data = to_json_dict(totals)
        data["band"] = performance_band(totals.attendance_rate).value
        return jsonify(data)

    @app.route("/api/departments", methods=["GET"], endpoint="api_departments")
    def api_departments():
        return jsonify(to_json_dict(list(container.departments_repo.list_all())))
