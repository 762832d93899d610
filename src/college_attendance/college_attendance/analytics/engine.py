"""Attendance aggregations.

Every function here is pure: it reads the records/students it is given, never
mutates them, and takes "now"/"today" as an explicit argument. Data anomalies
(dangling student ids, empty groups) degrade to zero counts or empty lists.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.rates import percent
from ..core.constants import (
    ALL_DEPARTMENTS,
    AVERAGE_RATE,
    DAILY_SERIES_LIMIT,
    EXCELLENT_RATE,
    GOOD_RATE,
    WEEKLY_OVERVIEW_DAYS,
)
from ..core.enums import AttendanceStatus, PerformanceBand
from ..students.department_model import Department
from ..students.model import Student
from .model import (
    DailyAttendance,
    DepartmentComparison,
    DepartmentToday,
    SessionStats,
    StudentAttendanceTotals,
    StudentRanking,
    SubjectRate,
    TodaySnapshot,
    WeeklyAttendance,
)


def filter_by_window_and_department(
    records: Iterable[AttendanceRecord],
    students: Iterable[Student],
    *,
    window_days: int,
    department: str = ALL_DEPARTMENTS,
    now: datetime,
) -> list[AttendanceRecord]:
    """Records dated inside the rolling window, optionally for one department.

    A record counts from midnight of its date, so with a window of N days the
    record dated exactly N days ago falls out as soon as the clock passes
    midnight. Records of unknown students are dropped only when a department
    filter is active.
    """

    cutoff = now - timedelta(days=window_days)
    department_of = {s.student_id: s.department for s in students}

    out: list[AttendanceRecord] = []
    for r in records:
        if datetime.combine(r.work_date, time.min) < cutoff:
            continue
        if department != ALL_DEPARTMENTS and department_of.get(r.student_id) != department:
            continue
        out.append(r)
    return out


def daily_series(records: Iterable[AttendanceRecord], *, limit: int = DAILY_SERIES_LIMIT) -> list[DailyAttendance]:
    counts: dict[date, dict[AttendanceStatus, int]] = {}
    for r in records:
        day = counts.setdefault(r.work_date, {s: 0 for s in AttendanceStatus})
        day[r.status] += 1

    series = []
    for work_date in sorted(counts)[-limit:]:
        c = counts[work_date]
        total = sum(c.values())
        series.append(
            DailyAttendance(
                work_date=work_date,
                present=c[AttendanceStatus.PRESENT],
                absent=c[AttendanceStatus.ABSENT],
                late=c[AttendanceStatus.LATE],
                rate=percent(c[AttendanceStatus.PRESENT], total),
            )
        )
    return series


def subject_rates(records: Iterable[AttendanceRecord]) -> list[SubjectRate]:
    present: dict[str, int] = {}
    total: dict[str, int] = {}
    for r in records:
        total[r.subject] = total.get(r.subject, 0) + 1
        if r.status == AttendanceStatus.PRESENT:
            present[r.subject] = present.get(r.subject, 0) + 1

    rows = [
        SubjectRate(subject=subject, attendance_rate=percent(present.get(subject, 0), count), total_classes=count)
        for subject, count in total.items()
    ]
    rows.sort(key=lambda x: (-x.attendance_rate, x.subject))
    return rows


def student_totals(records: Iterable[AttendanceRecord], student_id: str) -> StudentAttendanceTotals:
    counts = {s: 0 for s in AttendanceStatus}
    for r in records:
        if r.student_id == student_id:
            counts[r.status] += 1

    total = sum(counts.values())
    return StudentAttendanceTotals(
        total_classes=total,
        present_classes=counts[AttendanceStatus.PRESENT],
        late_classes=counts[AttendanceStatus.LATE],
        absent_classes=counts[AttendanceStatus.ABSENT],
        attendance_rate=percent(counts[AttendanceStatus.PRESENT], total),
    )


def student_rankings(records: Iterable[AttendanceRecord], students: Sequence[Student]) -> list[StudentRanking]:
    """Per-student rates for students with at least one record, best first.

    Ties are broken by more classes first, then by student id.
    """

    summary_map: dict[str, dict[AttendanceStatus, int]] = {}
    for r in records:
        s = summary_map.setdefault(r.student_id, {st: 0 for st in AttendanceStatus})
        s[r.status] += 1

    rows: list[StudentRanking] = []
    for student in students:
        counts = summary_map.get(student.student_id)
        if not counts:
            continue
        total = sum(counts.values())
        rows.append(
            StudentRanking(
                student=student,
                attendance_rate=percent(counts[AttendanceStatus.PRESENT], total),
                total_classes=total,
                present_classes=counts[AttendanceStatus.PRESENT],
                late_classes=counts[AttendanceStatus.LATE],
            )
        )

    rows.sort(key=lambda x: (-x.attendance_rate, -x.total_classes, x.student.student_id))
    return rows


def department_comparison(
    records: Iterable[AttendanceRecord],
    students: Iterable[Student],
    departments: Iterable[Department],
) -> list[DepartmentComparison]:
    """Present rate per department over whatever records are passed in.

    Callers pass the full record set here, not the window-filtered one.
    """

    department_of = {s.student_id: s.department for s in students}
    enrolled: dict[str, int] = {}
    for dept_name in department_of.values():
        enrolled[dept_name] = enrolled.get(dept_name, 0) + 1

    present: dict[str, int] = {}
    total: dict[str, int] = {}
    for r in records:
        dept_name = department_of.get(r.student_id)
        if dept_name is None:
            continue
        total[dept_name] = total.get(dept_name, 0) + 1
        if r.status == AttendanceStatus.PRESENT:
            present[dept_name] = present.get(dept_name, 0) + 1

    rows = []
    for dept in departments:
        rate = percent(present.get(dept.name, 0), total.get(dept.name, 0))
        rows.append(
            DepartmentComparison(
                department=dept.name,
                attendance_rate=rate,
                total_students=enrolled.get(dept.name, 0),
                average_attendance=rate,
            )
        )
    return rows


def _present_and_late_on(
    records: Iterable[AttendanceRecord], roster: set[str], day: date
) -> tuple[set[str], set[str]]:
    """Distinct roster students seen present / late on ``day``.

    A student with both a present and a late session counts as present only.
    """

    present: set[str] = set()
    late: set[str] = set()
    for r in records:
        if r.work_date != day or r.student_id not in roster:
            continue
        if r.status == AttendanceStatus.PRESENT:
            present.add(r.student_id)
        elif r.status == AttendanceStatus.LATE:
            late.add(r.student_id)
    return present, late - present


def today_snapshot(
    records: Iterable[AttendanceRecord], students: Sequence[Student], *, today: date
) -> TodaySnapshot:
    roster = {s.student_id for s in students}
    total = len(students)
    present, late = _present_and_late_on(records, roster, today)

    return TodaySnapshot(
        total_students=total,
        present_today=len(present),
        late_today=len(late),
        # Residual: students with only absent sessions or no session at all.
        absent_today=max(0, total - len(present) - len(late)),
        attendance_rate=percent(len(present), total),
    )


def weekly_overview(
    records: Sequence[AttendanceRecord],
    students: Sequence[Student],
    *,
    today: date,
    days: int = WEEKLY_OVERVIEW_DAYS,
) -> list[WeeklyAttendance]:
    roster = {s.student_id for s in students}
    total = len(students)

    out = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        present, late = _present_and_late_on(records, roster, day)
        out.append(
            WeeklyAttendance(
                work_date=day,
                label=day.strftime("%a"),
                present=len(present),
                late=len(late),
                absent=max(0, total - len(present) - len(late)),
            )
        )
    return out


def department_today(
    records: Sequence[AttendanceRecord],
    students: Sequence[Student],
    departments: Iterable[Department],
    *,
    today: date,
) -> list[DepartmentToday]:
    rows = []
    for dept in departments:
        members = {s.student_id for s in students if s.department == dept.name}
        present, _ = _present_and_late_on(records, members, today)
        rows.append(
            DepartmentToday(
                code=dept.code,
                attendance_rate=percent(len(present), len(members)),
                total_students=len(members),
            )
        )
    return rows


def session_stats(statuses: Mapping[str, Optional[AttendanceStatus]]) -> SessionStats:
    """Counts for one class session; ``None`` means the student was not marked."""

    values = list(statuses.values())
    total = len(values)
    present = values.count(AttendanceStatus.PRESENT)
    return SessionStats(
        total_students=total,
        marked_students=sum(1 for v in values if v is not None),
        present_students=present,
        late_students=values.count(AttendanceStatus.LATE),
        absent_students=values.count(AttendanceStatus.ABSENT),
        attendance_rate=percent(present, total),
    )


def performance_band(rate: int) -> PerformanceBand:
    if rate >= EXCELLENT_RATE:
        return PerformanceBand.EXCELLENT
    if rate >= GOOD_RATE:
        return PerformanceBand.GOOD
    if rate >= AVERAGE_RATE:
        return PerformanceBand.AVERAGE
    return PerformanceBand.POOR
