from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_department, require_window
from ..core.constants import ALL_DEPARTMENTS, DEFAULT_WINDOW_DAYS
from ..students.department_repository import DepartmentRepository
from ..students.repository import StudentRepository
from . import engine
from .model import (
    AnalyticsReport,
    DailyAttendance,
    DepartmentComparison,
    DepartmentToday,
    StudentRanking,
    SubjectRate,
    TodaySnapshot,
    WeeklyAttendance,
)

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Use case: dashboard and analytics figures.

    Nothing is cached: every call re-reads the repositories and recomputes.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        departments: DepartmentRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        default_window_days: int = DEFAULT_WINDOW_DAYS,
    ):
        self._attendance = attendance
        self._students = students
        self._departments = departments
        self._clock = clock or now_local
        self._default_window_days = int(default_window_days)

    def _windowed(self, window_days: Optional[int], department: Optional[str]) -> tuple[int, str, list[AttendanceRecord]]:
        days = require_window(self._default_window_days if window_days is None else window_days)
        dept = require_department(department, (d.name for d in self._departments.list_all()))
        logger.debug("analytics query", extra={"window_days": days, "department": dept})

        records = engine.filter_by_window_and_department(
            self._attendance.list_all(),
            self._students.list_all(),
            window_days=days,
            department=dept,
            now=self._clock(),
        )
        return days, dept, records

    def daily_trend(self, *, window_days: Optional[int] = None, department: Optional[str] = ALL_DEPARTMENTS) -> list[DailyAttendance]:
        _, _, records = self._windowed(window_days, department)
        return engine.daily_series(records)

    def subject_performance(self, *, window_days: Optional[int] = None, department: Optional[str] = ALL_DEPARTMENTS) -> list[SubjectRate]:
        _, _, records = self._windowed(window_days, department)
        return engine.subject_rates(records)

    def student_performance(self, *, window_days: Optional[int] = None, department: Optional[str] = ALL_DEPARTMENTS) -> list[StudentRanking]:
        _, _, records = self._windowed(window_days, department)
        return engine.student_rankings(records, self._students.list_all())

    def department_comparison(self) -> list[DepartmentComparison]:
        # Intentionally over all records, independent of the selected window.
        return engine.department_comparison(
            self._attendance.list_all(),
            self._students.list_all(),
            self._departments.list_all(),
        )

    def analytics_report(self, *, window_days: Optional[int] = None, department: Optional[str] = ALL_DEPARTMENTS) -> AnalyticsReport:
        days, dept, records = self._windowed(window_days, department)
        return AnalyticsReport(
            window_days=days,
            department=dept,
            daily=engine.daily_series(records),
            subjects=engine.subject_rates(records),
            students=engine.student_rankings(records, self._students.list_all()),
            departments=self.department_comparison(),
        )

    def today_stats(self) -> TodaySnapshot:
        return engine.today_snapshot(
            self._attendance.list_all(),
            self._students.list_all(),
            today=self._clock().date(),
        )

    def weekly_overview(self) -> list[WeeklyAttendance]:
        return engine.weekly_overview(
            self._attendance.list_all(),
            self._students.list_all(),
            today=self._clock().date(),
        )

    def department_today(self) -> list[DepartmentToday]:
        return engine.department_today(
            self._attendance.list_all(),
            self._students.list_all(),
            self._departments.list_all(),
            today=self._clock().date(),
        )
