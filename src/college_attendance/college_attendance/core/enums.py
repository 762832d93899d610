from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored on an attendance record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class MarkState(str, Enum):
    """Display state of a student for one class session.

    NOT_MARKED is never stored: it is what a lookup miss maps to.
    """

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    NOT_MARKED = "not-marked"

    @classmethod
    def from_status(cls, status: AttendanceStatus | None) -> "MarkState":
        if status is None:
            return cls.NOT_MARKED
        return cls(status.value)


class PerformanceBand(str, Enum):
    """Bucket used to badge attendance rates in listings."""

    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"
