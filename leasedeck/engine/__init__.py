"""Lease economics engine: pure functions from LeaseScenario to annual cash flow and metrics."""

from .analysis import analyze_scenario
from .cashflow import build_annual_cashflow
from .escalation import escalate
from .metrics import (
    average_annual_return,
    cash_on_cash_return,
    compute_metrics,
    concession_outlay,
    effective_rent_psf,
    irr,
    lease_term_years,
    npv,
    payback_period,
    roi,
)
from .periods import overlap_months

__all__ = [
    "analyze_scenario",
    "average_annual_return",
    "build_annual_cashflow",
    "cash_on_cash_return",
    "compute_metrics",
    "concession_outlay",
    "effective_rent_psf",
    "escalate",
    "irr",
    "lease_term_years",
    "npv",
    "overlap_months",
    "payback_period",
    "roi",
]
