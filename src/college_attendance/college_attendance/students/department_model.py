from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    dept_id: str
    name: str
    code: str
    # Institution-wide head-count; not derived from enrolled Student rows.
    total_students: int
