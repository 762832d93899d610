from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def now_local() -> datetime:
    """Current local time; the default clock for services built without one."""
    return datetime.now()


def short_day_label(value: date) -> str:
    """'Oct 5' style label used by chart axes."""
    return f"{value:%b} {value.day}"
