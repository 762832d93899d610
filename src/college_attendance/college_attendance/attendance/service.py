from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..analytics.engine import session_stats
from ..analytics.model import SessionStats
from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, MarkState
from ..students.model import Student
from ..students.repository import StudentRepository
from .repository import AttendanceRepository


@dataclass(frozen=True)
class RosterRowUI:
    student_id: str
    name: str
    roll_number: str
    department: str
    state: MarkState
    label: str
    css_class: str


def matches_roster_search(student: Student, search: str) -> bool:
    term = (search or "").strip().lower()
    if not term:
        return True
    return (
        term in student.first_name.lower()
        or term in student.last_name.lower()
        or term in student.roll_number.lower()
    )


class AttendanceService:
    """Use case: the per-class marking sheet.

    Read-only; the sheet shows what is recorded and which students were not
    marked for the chosen date and subject.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._clock = clock or now_local

    def today(self) -> date:
        return self._clock().date()

    def status_for(self, student_id: str, work_date: date, subject: str) -> Optional[AttendanceStatus]:
        return self._attendance.find_status(student_id, work_date, subject)

    def _listed(self, search: str) -> list[Student]:
        return [s for s in self._students.list_all() if matches_roster_search(s, search)]

    def roster(self, *, work_date: date, subject: str, search: str = "") -> list[RosterRowUI]:
        return [
            self._to_ui(s, self.status_for(s.student_id, work_date, subject))
            for s in self._listed(search)
        ]

    def roster_stats(self, *, work_date: date, subject: str, search: str = "") -> SessionStats:
        return session_stats(
            {s.student_id: self.status_for(s.student_id, work_date, subject) for s in self._listed(search)}
        )

    def _to_ui(self, student: Student, status: Optional[AttendanceStatus]) -> RosterRowUI:
        state = MarkState.from_status(status)
        label = {
            MarkState.PRESENT: "Present",
            MarkState.LATE: "Late",
            MarkState.ABSENT: "Absent",
            MarkState.NOT_MARKED: "Not Marked",
        }[state]

        css = {
            MarkState.PRESENT: "bg-success",
            MarkState.LATE: "bg-warning text-dark",
            MarkState.ABSENT: "bg-danger",
            MarkState.NOT_MARKED: "bg-secondary",
        }[state]

        return RosterRowUI(
            student_id=student.student_id,
            name=student.full_name,
            roll_number=student.roll_number,
            department=student.department,
            state=state,
            label=label,
            css_class=css,
        )
