from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .analytics.export import ReportExporter
from .analytics.service import AnalyticsService
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_DATA_DAYS, DEFAULT_WINDOW_DAYS
from .datastore.seed import build_record_store
from .datastore.store import RecordStore
from .students.memory_department_repository import InMemoryDepartmentRepository
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: RecordStore

    students_repo: InMemoryStudentRepository
    departments_repo: InMemoryDepartmentRepository
    attendance_repo: InMemoryAttendanceRepository

    student_service: StudentService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService
    report_exporter: ReportExporter


def build_container(
    *,
    settings: Optional[dict] = None,
    store: Optional[RecordStore] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    settings = settings or {}
    clock = clock or now_local

    if store is None:
        seed = settings.get("DATA_SEED")
        store = build_record_store(
            today=clock().date(),
            days=int(settings.get("DATA_DAYS", DEFAULT_DATA_DAYS)),
            seed=None if seed is None else int(seed),
        )

    students_repo = InMemoryStudentRepository(store)
    departments_repo = InMemoryDepartmentRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)

    student_service = StudentService(students_repo, departments_repo, attendance_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo, clock=clock)
    analytics_service = AnalyticsService(
        attendance_repo,
        students_repo,
        departments_repo,
        clock=clock,
        default_window_days=int(settings.get("DEFAULT_WINDOW_DAYS", DEFAULT_WINDOW_DAYS)),
    )

    logger.debug(
        "container ready",
        extra={"students": len(store.students), "records": len(store.records)},
    )

    return Container(
        store=store,
        students_repo=students_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        student_service=student_service,
        attendance_service=attendance_service,
        analytics_service=analytics_service,
        report_exporter=ReportExporter(),
    )
