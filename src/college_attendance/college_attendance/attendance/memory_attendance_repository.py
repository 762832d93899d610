from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..datastore.store import RecordStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store
        # First record wins for a (student, date, subject) session.
        self._status_by_session: dict[tuple[str, date, str], AttendanceStatus] = {}
        for r in store.list_attendance_records():
            self._status_by_session.setdefault((r.student_id, r.work_date, r.subject), r.status)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._store.list_attendance_records()

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._store.list_attendance_records() if r.student_id == student_id]

    def find_status(self, student_id: str, work_date: date, subject: str) -> Optional[AttendanceStatus]:
        return self._status_by_session.get((student_id, work_date, subject))
