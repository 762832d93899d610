from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import ALL_DEPARTMENTS, ALL_YEARS, WINDOW_CHOICES
from ..core.exceptions import ValidationError


def require_window(value, choices: Iterable[int] = WINDOW_CHOICES) -> int:
    try:
        days = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"window must be one of {tuple(choices)}") from None
    if days not in tuple(choices):
        raise ValidationError(f"window must be one of {tuple(choices)}")
    return days


def require_department(value: Optional[str], known: Iterable[str]) -> str:
    if not value or value == ALL_DEPARTMENTS:
        return ALL_DEPARTMENTS
    if value not in set(known):
        raise ValidationError(f"Unknown department '{value}'")
    return value


def require_year(value) -> Optional[int]:
    if value is None or value == "" or value == ALL_YEARS:
        return None
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError("year must be between 1 and 4") from None
    if not 1 <= year <= 4:
        raise ValidationError("year must be between 1 and 4")
    return year
