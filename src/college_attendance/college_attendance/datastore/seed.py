"""Synthetic data set for demos and tests.

The roster and departments are fixed; attendance is drawn from an injected
``random.Random`` so a given seed always reproduces the same records.
"""
from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord, make_record_id
from ..core.constants import DEFAULT_DATA_DAYS
from ..core.enums import AttendanceStatus
from ..students.department_model import Department
from ..students.model import Student
from .store import RecordStore

logger = logging.getLogger(__name__)

SUBJECTS = ("Mathematics", "Physics", "Programming", "Electronics", "Mechanical")
TEACHERS = ("Prof. Ram Kumar", "Prof. Shayam", "Prof. Manish", "Prof. Jatin", "Prof. Ansul Sagar")

PRESENT_PROBABILITY = 0.85
LATE_PROBABILITY = 0.10

DEFAULT_STUDENTS: tuple[Student, ...] = (
    Student("1", "Rohit", "Verma", "rohit.verma@college.edu", "CS2021001",
            "Computer Science", 3, date(2021, 8, 15)),
    Student("2", "Pradeep", "Singh", "pradeep.singh@college.edu", "CS2021002",
            "Computer Science", 3, date(2021, 8, 15)),
    Student("3", "Nikhil", "Kanaujia", "nikhil.kanaujia@college.edu", "CS2022001",
            "Electrical Engineering", 2, date(2022, 8, 15)),
    Student("4", "Preeti", "Mandel", "preeti.mandel@college.edu", "ME2021001",
            "Mechanical Engineering", 3, date(2021, 8, 15)),
    Student("5", "Pratul", "Tiwari", "pratul.tiwari@college.edu", "CS2022008",
            "Computer Science", 3, date(2022, 8, 15)),
    Student("6", "Nitin", "Mathur", "nitin.mathur@college.edu", "EE2021004",
            "Electrical Engineering", 3, date(2021, 8, 15)),
)

DEFAULT_DEPARTMENTS: tuple[Department, ...] = (
    Department(dept_id="1", name="Computer Science", code="CS", total_students=300),
    Department(dept_id="2", name="Electrical Engineering", code="EE", total_students=120),
    Department(dept_id="3", name="Mechanical Engineering", code="ME", total_students=100),
)


def _draw_status(rng: random.Random) -> AttendanceStatus:
    roll = rng.random()
    if roll < PRESENT_PROBABILITY:
        return AttendanceStatus.PRESENT
    if roll < PRESENT_PROBABILITY + LATE_PROBABILITY:
        return AttendanceStatus.LATE
    return AttendanceStatus.ABSENT


def _draw_clock(rng: random.Random, first_hour: int) -> str:
    return f"{first_hour + rng.randrange(8)}:{rng.randrange(60):02d}"


def generate_records(
    students: Sequence[Student],
    *,
    today: date,
    days: int = DEFAULT_DATA_DAYS,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> list[AttendanceRecord]:
    """Generate 2-3 class sessions per student per day for ``days`` days up to ``today``."""

    rng = rng or random.Random(seed)
    records: list[AttendanceRecord] = []

    for day_offset in range(days):
        work_date = today - timedelta(days=day_offset)
        for student in students:
            class_count = rng.randrange(2) + 2
            for i in range(class_count):
                subject = rng.choice(SUBJECTS)
                teacher = rng.choice(TEACHERS)
                status = _draw_status(rng)

                time_in = time_out = None
                if status != AttendanceStatus.ABSENT:
                    time_in = _draw_clock(rng, 9)
                    time_out = _draw_clock(rng, 10)

                records.append(
                    AttendanceRecord(
                        record_id=make_record_id(student.student_id, work_date, i),
                        student_id=student.student_id,
                        work_date=work_date,
                        status=status,
                        subject=subject,
                        teacher=teacher,
                        time_in=time_in,
                        time_out=time_out,
                    )
                )

    return records


def build_record_store(
    *,
    today: date,
    days: int = DEFAULT_DATA_DAYS,
    seed: Optional[int] = None,
    students: Sequence[Student] = DEFAULT_STUDENTS,
    departments: Sequence[Department] = DEFAULT_DEPARTMENTS,
) -> RecordStore:
    records = generate_records(students, today=today, days=days, seed=seed)
    logger.info(
        "generated attendance data set",
        extra={"students": len(students), "records": len(records), "days": days, "seed": seed},
    )
    return RecordStore.from_iterables(students=students, records=records, departments=departments)
