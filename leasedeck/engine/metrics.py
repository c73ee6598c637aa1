"""
NPV, effective rent and return metrics over annual cash-flow lines.

Discounting is end-of-year: the first line is discounted one full period.
No intermediate rounding; callers round for display.
"""
from __future__ import annotations

from datetime import timedelta
from math import isfinite, nan, pow
from typing import List, Optional, Sequence

from leasedeck.models import AnnualCashflowLine, CashflowMetrics, LeaseScenario

from .utils import month_index


def npv(lines: Sequence[AnnualCashflowLine], discount_rate: float) -> float:
    return sum(
        row.net_cash_flow / pow(1.0 + discount_rate, i + 1)
        for i, row in enumerate(lines)
    )


def effective_rent_psf(lines: Sequence[AnnualCashflowLine], rsf: float, years: float) -> float:
    """Blended net rent $/RSF/year; both denominator terms are floored at 1."""
    total = sum(row.net_cash_flow for row in lines)
    return total / (max(1.0, rsf) * max(1.0, years))


def irr(
    lines: Sequence[AnnualCashflowLine],
    guess: float = 0.1,
    max_iterations: int = 100,
    tolerance: float = 1e-6,
) -> float:
    """
    Internal rate of return by Newton iteration on npv().

    Uses the same end-of-year convention as npv(), so the first line is
    discounted one period. Stops when npv or its derivative falls under
    `tolerance`; an all-zero series therefore returns `guess` unchanged.
    Returns nan when the iteration leaves the (-1, inf) domain.
    """
    rate = guess
    try:
        for _ in range(max_iterations):
            value = npv(lines, rate)
            slope = -sum(
                (i + 1) * row.net_cash_flow / pow(1.0 + rate, i + 2)
                for i, row in enumerate(lines)
            )
            if abs(value) < tolerance or abs(slope) < tolerance:
                break
            rate -= value / slope
            if rate <= -1.0 or not isfinite(rate):
                return nan
    except (OverflowError, ZeroDivisionError):
        return nan
    return rate


def payback_period(lines: Sequence[AnnualCashflowLine]) -> float:
    """
    Years until cumulative net cash flow reaches zero, interpolated within
    the crossing year. A series that never pays back returns len(lines).
    """
    if not lines:
        return 0.0
    cumulative = 0.0
    year = 0
    for row in lines:
        cumulative += row.net_cash_flow
        year += 1
        if cumulative >= 0:
            break
    if cumulative < 0:
        return float(len(lines))

    crossing = lines[year - 1].net_cash_flow
    if crossing == 0:
        return float(year - 1)
    previous = cumulative - crossing
    return year - 1 + abs(previous) / abs(crossing)


def cash_on_cash_return(lines: Sequence[AnnualCashflowLine], initial_investment: float) -> float:
    total = sum(row.net_cash_flow for row in lines)
    return total / abs(initial_investment) if initial_investment != 0 else 0.0


def average_annual_return(lines: Sequence[AnnualCashflowLine]) -> float:
    total = sum(row.net_cash_flow for row in lines)
    return total / len(lines) if lines else 0.0


def roi(lines: Sequence[AnnualCashflowLine], initial_investment: float) -> float:
    total = sum(row.net_cash_flow for row in lines)
    return (total - initial_investment) / abs(initial_investment) if initial_investment != 0 else 0.0


def lease_term_years(scenario: LeaseScenario) -> float:
    """
    Actual term length in years, counted in whole months.

    The term runs through the end of the expiration day, so 2026-07-01 to
    2031-06-30 is 60 months, i.e. 5.0 years. Inverted dates give 0.
    """
    dates = scenario.key_dates
    months = month_index(dates.expiration + timedelta(days=1)) - month_index(dates.commencement)
    return max(0.0, months / 12.0)


def concession_outlay(scenario: LeaseScenario) -> float:
    """Landlord's up-front cost: TI allowance over the full RSF plus moving and other credits."""
    c = scenario.concessions
    return (c.ti_allowance_psf or 0.0) * scenario.rsf + (c.moving_allowance or 0.0) + (c.other_credits or 0.0)


def _investment_lines(lines: Sequence[AnnualCashflowLine], outlay: float) -> List[AnnualCashflowLine]:
    """Landlord view of the lines: the outlay is paid out of the first year's net."""
    out = list(lines)
    if out and outlay:
        first = out[0]
        out[0] = first.model_copy(update={"net_cash_flow": first.net_cash_flow - outlay})
    return out


def compute_metrics(lines: Sequence[AnnualCashflowLine], scenario: LeaseScenario) -> CashflowMetrics:
    years = lease_term_years(scenario)
    outlay = concession_outlay(scenario)
    investment = _investment_lines(lines, outlay)

    rate: Optional[float] = None
    flows = [row.net_cash_flow for row in investment]
    if any(f < 0 for f in flows) and any(f > 0 for f in flows):
        rate = irr(investment)
        if not isfinite(rate):
            rate = None

    return CashflowMetrics(
        effective_rate=effective_rent_psf(lines, scenario.rsf, years),
        npv=npv(lines, scenario.cashflow_settings.discount_rate),
        total_years=years,
        initial_investment=outlay,
        irr=rate,
        payback_period=payback_period(investment),
        cash_on_cash_return=cash_on_cash_return(lines, outlay),
        average_annual_return=average_annual_return(lines),
        roi=roi(lines, outlay),
    )
