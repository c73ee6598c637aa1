"""
Analysis entry point: cash-flow lines plus summary metrics for one scenario.
"""
from __future__ import annotations

from leasedeck.models import CashflowResponse, LeaseScenario

from .cashflow import build_annual_cashflow
from .metrics import compute_metrics


def analyze_scenario(scenario: LeaseScenario) -> CashflowResponse:
    """
    Run the annual cash-flow builder and the metrics calculator.

    Always recomputed; results are never cached since any scenario edit
    invalidates them.
    """
    lines = build_annual_cashflow(scenario)
    metrics = compute_metrics(lines, scenario)
    return CashflowResponse(lines=lines, metrics=metrics)
