from __future__ import annotations

from datetime import date

from .utils import month_index


def overlap_months(period_start: date, period_end: date, year_start: date, year_end: date) -> int:
    """
    Months of [period_start, period_end] falling inside [year_start, year_end].

    Any partial month counts as a full month, at both ends of the window.
    Returns 0 when the clamped end is not strictly after the clamped start.
    """
    start = max(period_start, year_start)
    end = min(period_end, year_end)
    if end <= start:
        return 0
    return month_index(end) - month_index(start) + 1
