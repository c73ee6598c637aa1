"""Numeric and calendar helpers shared by the engine modules."""
from __future__ import annotations

from datetime import date
from typing import List


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def year_start(year: int) -> date:
    return date(year, 1, 1)


def year_end(year: int) -> date:
    return date(year, 12, 31)


def month_index(d: date) -> int:
    """Absolute month number, so differences give whole calendar months."""
    return d.year * 12 + (d.month - 1)


def calendar_years(commencement: date, expiration: date) -> List[int]:
    """Every calendar year touched by the term, ascending; empty if expiration precedes commencement."""
    return list(range(commencement.year, expiration.year + 1))
