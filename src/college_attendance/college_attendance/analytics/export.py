from __future__ import annotations

import io

import pandas as pd

from .engine import performance_band
from .model import AnalyticsReport

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ReportExporter:
    """Render an AnalyticsReport as downloadable files (kept in memory)."""

    def frames(self, report: AnalyticsReport) -> dict[str, pd.DataFrame]:
        daily = pd.DataFrame(
            [
                {
                    "date": d.work_date.isoformat(),
                    "present": d.present,
                    "late": d.late,
                    "absent": d.absent,
                    "rate": d.rate,
                }
                for d in report.daily
            ],
            columns=["date", "present", "late", "absent", "rate"],
        )
        subjects = pd.DataFrame(
            [
                {
                    "subject": s.subject,
                    "attendance_rate": s.attendance_rate,
                    "total_classes": s.total_classes,
                    "band": performance_band(s.attendance_rate).value,
                }
                for s in report.subjects
            ],
            columns=["subject", "attendance_rate", "total_classes", "band"],
        )
        students = pd.DataFrame(
            [
                {
                    "rank": i,
                    "student_id": r.student.student_id,
                    "name": r.student.full_name,
                    "roll_number": r.student.roll_number,
                    "department": r.student.department,
                    "attendance_rate": r.attendance_rate,
                    "present_classes": r.present_classes,
                    "late_classes": r.late_classes,
                    "total_classes": r.total_classes,
                    "band": performance_band(r.attendance_rate).value,
                }
                for i, r in enumerate(report.students, start=1)
            ],
            columns=[
                "rank",
                "student_id",
                "name",
                "roll_number",
                "department",
                "attendance_rate",
                "present_classes",
                "late_classes",
                "total_classes",
                "band",
            ],
        )
        departments = pd.DataFrame(
            [
                {
                    "department": d.department,
                    "attendance_rate": d.attendance_rate,
                    "total_students": d.total_students,
                    "average_attendance": d.average_attendance,
                }
                for d in report.departments
            ],
            columns=["department", "attendance_rate", "total_students", "average_attendance"],
        )
        return {"Daily": daily, "Subjects": subjects, "Students": students, "Departments": departments}

    def to_csv(self, report: AnalyticsReport) -> bytes:
        """One CSV section per table, each preceded by a '# <name>' line."""

        out = io.StringIO()
        for name, df in self.frames(report).items():
            out.write(f"# {name}\n")
            df.to_csv(out, index=False)
            out.write("\n")
        return out.getvalue().encode("utf-8-sig")

    def to_excel(self, report: AnalyticsReport) -> io.BytesIO:
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            for name, df in self.frames(report).items():
                df.to_excel(writer, index=False, sheet_name=name)
        output.seek(0)
        return output
