from __future__ import annotations

import io
from datetime import date

import pandas as pd

from src.college_attendance.college_attendance.analytics.export import ReportExporter
from src.college_attendance.college_attendance.analytics.model import (
    AnalyticsReport,
    DailyAttendance,
    DepartmentComparison,
    StudentRanking,
    SubjectRate,
)


def _report(students) -> AnalyticsReport:
    return AnalyticsReport(
        window_days=7,
        department="all",
        daily=[DailyAttendance(work_date=date(2026, 1, 31), present=3, absent=1, late=0, rate=75)],
        subjects=[SubjectRate(subject="Math", attendance_rate=90, total_classes=10)],
        students=[
            StudentRanking(student=students[0], attendance_rate=60, total_classes=5, present_classes=3, late_classes=1)
        ],
        departments=[
            DepartmentComparison(department="Computer Science", attendance_rate=80, total_students=2, average_attendance=80)
        ],
    )


def test_csv_has_one_section_per_table(students):
    text = ReportExporter().to_csv(_report(students)).decode("utf-8-sig")

    for section in ("# Daily", "# Subjects", "# Students", "# Departments"):
        assert section in text
    assert "2026-01-31,3,0,1,75" in text
    assert "Math,90,10,excellent" in text
    assert "1,a,Asha Rao,CS2024001,Computer Science,60,3,1,5,poor" in text


def test_excel_has_one_sheet_per_table(students):
    sheets = pd.read_excel(ReportExporter().to_excel(_report(students)), sheet_name=None)

    assert set(sheets) == {"Daily", "Subjects", "Students", "Departments"}
    assert sheets["Students"].loc[0, "name"] == "Asha Rao"
    assert int(sheets["Departments"].loc[0, "average_attendance"]) == 80


def test_empty_report_still_has_headers():
    empty = AnalyticsReport(window_days=30, department="all", daily=[], subjects=[], students=[], departments=[])

    frames = ReportExporter().frames(empty)

    assert all(df.empty for df in frames.values())
    assert list(frames["Daily"].columns) == ["date", "present", "late", "absent", "rate"]
    assert isinstance(ReportExporter().to_excel(empty), io.BytesIO)
