from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..analytics.engine import student_totals
from ..analytics.model import StudentAttendanceTotals
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_department, require_year
from ..core.constants import ALL_DEPARTMENTS, AVERAGE_RATE, EXCELLENT_RATE
from ..core.exceptions import NotFoundError
from .department_repository import DepartmentRepository
from .model import Student
from .repository import StudentRepository


@dataclass(frozen=True)
class DirectorySummary:
    listed: int
    excellent: int
    at_risk: int


class StudentService:
    """Use case: the student directory (search, filters, per-student totals)."""

    def __init__(
        self,
        students: StudentRepository,
        departments: DepartmentRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._departments = departments
        self._attendance = attendance

    def search(self, *, search: str = "", department: Optional[str] = ALL_DEPARTMENTS, year=None) -> list[Student]:
        dept = require_department(department, (d.name for d in self._departments.list_all()))
        wanted_year = require_year(year)
        term = (search or "").strip().lower()

        out = []
        for s in self._students.list_all():
            if term and not any(
                term in value.lower() for value in (s.first_name, s.last_name, s.roll_number, s.email)
            ):
                continue
            if dept != ALL_DEPARTMENTS and s.department != dept:
                continue
            if wanted_year is not None and s.year != wanted_year:
                continue
            out.append(s)
        return out

    def attendance_totals(self, student_id: str) -> StudentAttendanceTotals:
        if not self._students.get_by_id(student_id):
            raise NotFoundError(f"Student '{student_id}' not found")
        return student_totals(self._attendance.list_for_student(student_id), student_id)

    def directory_summary(self, *, search: str = "", department: Optional[str] = ALL_DEPARTMENTS, year=None) -> DirectorySummary:
        listed = self.search(search=search, department=department, year=year)
        rates = [self.attendance_totals(s.student_id).attendance_rate for s in listed]
        return DirectorySummary(
            listed=len(listed),
            excellent=sum(1 for r in rates if r >= EXCELLENT_RATE),
            at_risk=sum(1 for r in rates if r < AVERAGE_RATE),
        )
