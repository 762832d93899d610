from __future__ import annotations

import itertools
from datetime import date, datetime
from typing import Optional

import pytest

from src.college_attendance.college_attendance.attendance.model import AttendanceRecord
from src.college_attendance.college_attendance.core.enums import AttendanceStatus
from src.college_attendance.college_attendance.datastore.seed import DEFAULT_DEPARTMENTS, build_record_store
from src.college_attendance.college_attendance.students.department_model import Department
from src.college_attendance.college_attendance.students.model import Student


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 10, 0, 0)


@pytest.fixture
def students() -> list[Student]:
    return [
        Student("a", "Asha", "Rao", "asha.rao@college.edu", "CS2024001", "Computer Science", 1, date(2024, 8, 1)),
        Student("b", "Bilal", "Khan", "bilal.khan@college.edu", "EE2023004", "Electrical Engineering", 2, date(2023, 8, 1)),
        Student("c", "Chitra", "Iyer", "chitra.iyer@college.edu", "CS2022010", "Computer Science", 3, date(2022, 8, 1)),
    ]


@pytest.fixture
def departments() -> list[Department]:
    return [
        Department(dept_id="1", name="Computer Science", code="CS", total_students=300),
        Department(dept_id="2", name="Electrical Engineering", code="EE", total_students=120),
        Department(dept_id="3", name="Mechanical Engineering", code="ME", total_students=100),
    ]


@pytest.fixture
def make_record():
    counter = itertools.count()

    def _make(
        student_id: str,
        work_date: date,
        status: AttendanceStatus,
        subject: str = "Mathematics",
        *,
        teacher: str = "Prof. Manish",
        time_in: Optional[str] = None,
    ) -> AttendanceRecord:
        n = next(counter)
        if time_in is None and status != AttendanceStatus.ABSENT:
            time_in = "9:05"
        return AttendanceRecord(
            record_id=f"{student_id}-{work_date.isoformat()}-{n}",
            student_id=student_id,
            work_date=work_date,
            status=status,
            subject=subject,
            teacher=teacher,
            time_in=time_in,
            time_out="10:00" if time_in else None,
        )

    return _make


@pytest.fixture
def sample_store(fixed_now):
    return build_record_store(today=fixed_now.date(), days=30, seed=7, departments=DEFAULT_DEPARTMENTS)
