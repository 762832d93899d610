from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status for one class session.

    ``time_in``/``time_out`` are "H:MM" strings and are normally only set when
    the student was not absent; readers must not rely on that.
    """

    record_id: str
    student_id: str
    work_date: date
    status: AttendanceStatus
    subject: str
    teacher: str
    time_in: Optional[str] = None
    time_out: Optional[str] = None


def make_record_id(student_id: str, work_date: date, session_index: int) -> str:
    return f"{student_id}-{work_date.isoformat()}-{session_index}"
