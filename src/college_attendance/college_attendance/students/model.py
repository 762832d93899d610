from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: an enrolled student.

    Plain data object; repositories hand these out and never mutate them.
    """

    student_id: str
    first_name: str
    last_name: str
    email: str
    roll_number: str
    department: str
    year: int
    join_date: date
    profile_image: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
