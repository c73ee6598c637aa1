from .cashflow import (
    AnnualCashflowLine,
    CashflowMetrics,
    CashflowResponse,
    ProposalComparisonResponse,
    ProposalSummary,
)
from .proposal import (
    CompareProposalsRequest,
    CreateProposalRequest,
    DuplicateProposalRequest,
    Proposal,
    ProposalSide,
)
from .scenario import (
    AbatementScope,
    CashflowSettings,
    Concessions,
    EscalationMethod,
    Granularity,
    KeyDates,
    LeaseOption,
    LeaseScenario,
    LeaseType,
    OperatingConfig,
    OptionType,
    ParkingConfig,
    RentPeriod,
    ScenarioStatus,
)

__all__ = [
    "AbatementScope",
    "AnnualCashflowLine",
    "CashflowMetrics",
    "CashflowResponse",
    "CashflowSettings",
    "CompareProposalsRequest",
    "Concessions",
    "CreateProposalRequest",
    "DuplicateProposalRequest",
    "EscalationMethod",
    "Granularity",
    "KeyDates",
    "LeaseOption",
    "LeaseScenario",
    "LeaseType",
    "OperatingConfig",
    "OptionType",
    "ParkingConfig",
    "Proposal",
    "ProposalComparisonResponse",
    "ProposalSide",
    "ProposalSummary",
    "RentPeriod",
    "ScenarioStatus",
]
