from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_status(self, student_id: str, work_date: date, subject: str) -> Optional[AttendanceStatus]:
        """Status recorded for the session, or None when it was never marked."""

        raise NotImplementedError
