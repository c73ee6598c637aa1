"""
Reference scenario and the landlord/tenant demo proposal pair.
"""
from __future__ import annotations

from datetime import date

from leasedeck.models import (
    AbatementScope,
    CashflowSettings,
    Concessions,
    KeyDates,
    LeaseOption,
    LeaseScenario,
    LeaseType,
    OperatingConfig,
    OptionType,
    ParkingConfig,
    Proposal,
    ProposalSide,
    RentPeriod,
)
from leasedeck.services.proposals import create_proposal


def _rent_schedule(rates: tuple[float, float, float], free_months: int, scope: AbatementScope) -> list[RentPeriod]:
    """Three periods (2026-28, 2029-31, 2032-35) at 3% annual escalation; free rent on the first only."""
    first, second, third = rates
    return [
        RentPeriod(
            period_start=date(2026, 1, 1),
            period_end=date(2028, 12, 31),
            rent_psf=first,
            escalation_percentage=0.03,
            free_rent_months=free_months,
            abatement_applies_to=scope,
        ),
        RentPeriod(
            period_start=date(2029, 1, 1),
            period_end=date(2031, 12, 31),
            rent_psf=second,
            escalation_percentage=0.03,
        ),
        RentPeriod(
            period_start=date(2032, 1, 1),
            period_end=date(2035, 12, 31),
            rent_psf=third,
            escalation_percentage=0.03,
        ),
    ]


def base_scenario() -> LeaseScenario:
    """20k RSF Class A, full service with a 2026 base year, ten-year term."""
    return LeaseScenario(
        name="Demo - 20k RSF Class A",
        tenant_name="Acme Robotics",
        market="Miami-Dade",
        rsf=20000,
        lease_type=LeaseType.FULL_SERVICE,
        base_year=2026,
        key_dates=KeyDates(
            commencement=date(2026, 1, 1),
            rent_start=date(2026, 2, 1),
            expiration=date(2035, 12, 31),
        ),
        operating=OperatingConfig(est_op_ex_psf=18, escalation_method="fixed", escalation_value=0.03),
        rent_schedule=_rent_schedule((48, 51, 55), 6, AbatementScope.BASE_PLUS_NNN),
        concessions=Concessions(ti_allowance_psf=75, moving_allowance=250000),
        parking=ParkingConfig(monthly_rate_per_stall=180, stalls=40, escalation_method="fixed", escalation_value=0.03),
        options=[
            LeaseOption(
                type=OptionType.RENEWAL,
                window_open=date(2034, 1, 1),
                window_close=date(2034, 6, 30),
                terms="+Fair Market with 3% cap",
            )
        ],
        cashflow_settings=CashflowSettings(discount_rate=0.08, granularity="annual"),
    )


def demo_proposals() -> list[Proposal]:
    """Landlord v1 (the base scenario) and a tenant counter with lower rates and less free rent."""
    landlord_meta = base_scenario().model_copy(update={"name": "Landlord Proposal v1"})
    tenant_meta = base_scenario().model_copy(
        update={
            "name": "Tenant Counter v1",
            "rent_schedule": _rent_schedule((47, 50, 54), 3, AbatementScope.BASE_ONLY),
        }
    )
    return [
        create_proposal(landlord_meta, ProposalSide.LANDLORD, "LL v1"),
        create_proposal(tenant_meta, ProposalSide.TENANT, "Tenant Counter 1"),
    ]
