from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..students.model import Student


@dataclass(frozen=True)
class DailyAttendance:
    work_date: date
    present: int
    absent: int
    late: int
    rate: int


@dataclass(frozen=True)
class SubjectRate:
    subject: str
    attendance_rate: int
    total_classes: int


@dataclass(frozen=True)
class StudentRanking:
    student: Student
    attendance_rate: int
    total_classes: int
    present_classes: int
    late_classes: int


@dataclass(frozen=True)
class DepartmentComparison:
    department: str
    attendance_rate: int
    total_students: int
    # Same value as attendance_rate; kept for consumers reading either field.
    average_attendance: int


@dataclass(frozen=True)
class TodaySnapshot:
    total_students: int
    present_today: int
    late_today: int
    absent_today: int
    attendance_rate: int


@dataclass(frozen=True)
class WeeklyAttendance:
    work_date: date
    label: str
    present: int
    late: int
    absent: int


@dataclass(frozen=True)
class DepartmentToday:
    code: str
    attendance_rate: int
    total_students: int


@dataclass(frozen=True)
class StudentAttendanceTotals:
    total_classes: int
    present_classes: int
    late_classes: int
    absent_classes: int
    attendance_rate: int


@dataclass(frozen=True)
class SessionStats:
    total_students: int
    marked_students: int
    present_students: int
    late_students: int
    absent_students: int
    attendance_rate: int


@dataclass(frozen=True)
class AnalyticsReport:
    """Everything the analytics screen shows for one window/department choice."""

    window_days: int
    department: str
    daily: list[DailyAttendance]
    subjects: list[SubjectRate]
    students: list[StudentRanking]
    departments: list[DepartmentComparison]
