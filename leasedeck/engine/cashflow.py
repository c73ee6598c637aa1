from __future__ import annotations

from math import pow
from typing import Dict, List

from leasedeck.models import (
    AbatementScope,
    AnnualCashflowLine,
    LeaseScenario,
    LeaseType,
)

from .escalation import escalate
from .periods import overlap_months
from .utils import calendar_years, clamp, year_end, year_start


def _free_months(free_rent_months: int | None) -> float:
    return clamp(free_rent_months or 0, 0, 12)


def _apply_base_rent(scenario: LeaseScenario, rows: Dict[int, AnnualCashflowLine]) -> None:
    """
    Base rent per rent period, prorated by overlapping months.

    Escalation compounds from the period's own start year. Free rent is
    credited once, in the period's first calendar year, at the unescalated
    period rate.
    """
    rsf = scenario.rsf
    for period in scenario.rent_schedule:
        start_year = period.period_start.year
        for year, row in rows.items():
            months = overlap_months(period.period_start, period.period_end, year_start(year), year_end(year))
            if months == 0:
                continue
            escalated_rate = period.rent_psf * pow(1.0 + (period.escalation_percentage or 0.0), year - start_year)
            row.base_rent += escalated_rate * rsf * months / 12.0

            if year == start_year:
                free = _free_months(period.free_rent_months)
                if free > 0:
                    row.abatement_credit -= period.rent_psf * rsf * free / 12.0


def _apply_operating(scenario: LeaseScenario, rows: Dict[int, AnnualCashflowLine]) -> None:
    """
    Operating-expense pass-through above the base year (FS) or expense stop (NNN).

    base_plus_nnn free rent also abates that year's escalated opex.
    """
    rsf = scenario.rsf
    op = scenario.operating
    base_opex = op.est_op_ex_psf or 0.0
    method = op.escalation_method
    value = op.escalation_value or 0.0
    commencement_year = scenario.key_dates.commencement.year

    for year, row in rows.items():
        escalated_opex = escalate(base_opex, year - commencement_year, method, value)
        if scenario.lease_type == LeaseType.FULL_SERVICE:
            base_year = scenario.base_year if scenario.base_year is not None else commencement_year
            base_year_opex = escalate(base_opex, max(0, year - base_year), method, value)
            passthrough = max(0.0, escalated_opex - base_year_opex) * rsf
        else:
            stop = scenario.expense_stop_psf or 0.0
            passthrough = max(0.0, escalated_opex - stop) * rsf
        row.operating += passthrough

        for period in scenario.rent_schedule:
            if period.period_start.year != year:
                continue
            if period.abatement_applies_to != AbatementScope.BASE_PLUS_NNN:
                continue
            free = _free_months(period.free_rent_months)
            if free > 0:
                row.abatement_credit -= escalated_opex * rsf * free / 12.0


def _apply_parking(scenario: LeaseScenario, rows: Dict[int, AnnualCashflowLine]) -> None:
    """Annualized parking; escalation indexed from the commencement year."""
    parking = scenario.parking
    if parking is None or not parking.monthly_rate_per_stall or not parking.stalls:
        return
    value = parking.escalation_value or 0.0
    for i, row in enumerate(rows.values()):
        monthly = escalate(parking.monthly_rate_per_stall, i, parking.escalation_method, value)
        row.parking += monthly * 12.0 * parking.stalls


def build_annual_cashflow(scenario: LeaseScenario) -> List[AnnualCashflowLine]:
    """
    Year-by-year cash flow from commencement year to expiration year inclusive.

    Pure: the scenario is not modified and every call allocates fresh lines.
    Only abatement nets into net_cash_flow; TI and moving allowances do not.
    """
    years = calendar_years(scenario.key_dates.commencement, scenario.key_dates.expiration)
    rows: Dict[int, AnnualCashflowLine] = {year: AnnualCashflowLine(year=year) for year in years}

    _apply_base_rent(scenario, rows)
    _apply_operating(scenario, rows)
    _apply_parking(scenario, rows)

    lines = list(rows.values())
    for row in lines:
        row.subtotal = row.base_rent + row.operating + row.parking + row.other_recurring
        row.net_cash_flow = row.subtotal + row.abatement_credit
    return lines
