"""
Response models for the cash-flow engine and proposal comparison.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class AnnualCashflowLine(BaseModel):
    """
    One calendar year of the projection (dollar totals, not $/SF).

    subtotal = base_rent + operating + parking + other_recurring
    net_cash_flow = subtotal + abatement_credit
    TI and moving allowances are never netted in.
    """
    year: int
    base_rent: float = 0.0
    abatement_credit: float = 0.0
    operating: float = 0.0
    parking: float = 0.0
    other_recurring: float = 0.0
    subtotal: float = 0.0
    net_cash_flow: float = 0.0


class CashflowMetrics(BaseModel):
    """
    Scenario-level metrics.

    total_years is the actual term in years (whole months / 12). The return
    metrics take the landlord's view: initial_investment is the concession
    outlay (TI over the full RSF plus moving and other credits), and irr and
    payback_period run on the lines with that outlay paid out of year one.
    irr is None when that series has no sign change.
    """
    effective_rate: float = 0.0
    npv: float = 0.0
    total_years: float = 0.0
    initial_investment: float = 0.0
    irr: Optional[float] = None
    payback_period: float = 0.0
    cash_on_cash_return: float = 0.0
    average_annual_return: float = 0.0
    roi: float = 0.0


class CashflowResponse(BaseModel):
    """Response from POST /cashflow."""
    lines: List[AnnualCashflowLine] = Field(default_factory=list)
    metrics: CashflowMetrics = Field(default_factory=CashflowMetrics)


class ProposalSummary(BaseModel):
    """One row of a side-by-side proposal comparison."""
    proposal_id: str
    side: str
    label: str = ""
    scenario_name: str = ""
    metrics: CashflowMetrics
    total_net_cash_flow: float = 0.0
    npv_delta: float = Field(default=0.0, description="npv minus the baseline proposal's npv")
    effective_rate_delta: float = 0.0


class ProposalComparisonResponse(BaseModel):
    """Response from POST /proposals/compare; the first row is the baseline."""
    rows: List[ProposalSummary] = Field(default_factory=list)
