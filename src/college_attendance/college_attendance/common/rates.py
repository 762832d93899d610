from __future__ import annotations


def percent(part: int, total: int) -> int:
    """Whole-number percentage of ``part`` over ``total``.

    Exact halves round up (12.5 -> 13). A zero total yields 0.
    """
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)
