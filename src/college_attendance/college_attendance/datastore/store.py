from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..students.department_model import Department
from ..students.model import Student


@dataclass(frozen=True)
class RecordStore:
    """Read-only, in-process holder of the session's data set.

    Built once at start-up; every accessor returns the same immutable tuple.
    """

    students: tuple[Student, ...] = ()
    records: tuple[AttendanceRecord, ...] = ()
    departments: tuple[Department, ...] = ()

    @classmethod
    def from_iterables(
        cls,
        *,
        students: Iterable[Student],
        records: Iterable[AttendanceRecord],
        departments: Iterable[Department],
    ) -> "RecordStore":
        return cls(students=tuple(students), records=tuple(records), departments=tuple(departments))

    def list_students(self) -> Sequence[Student]:
        return self.students

    def list_attendance_records(self) -> Sequence[AttendanceRecord]:
        return self.records

    def list_departments(self) -> Sequence[Department]:
        return self.departments
