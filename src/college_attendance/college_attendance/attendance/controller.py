from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.serialization import to_json_dict
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/roster", methods=["GET"], endpoint="api_attendance_roster")
    def api_attendance_roster():
        date_s = request.args.get("date")
        work_date = parse_iso_date(date_s) if date_s else container.attendance_service.today()
        subject = (request.args.get("subject") or "").strip()
        if not subject:
            raise ValidationError("subject is required")
        search = request.args.get("search", "")

        rows = container.attendance_service.roster(work_date=work_date, subject=subject, search=search)
        stats = container.attendance_service.roster_stats(work_date=work_date, subject=subject, search=search)

        return jsonify(
            {
                "date": work_date.isoformat(),
                "subject": subject,
                "rows": to_json_dict(rows),
                "stats": to_json_dict(stats),
            }
        )
