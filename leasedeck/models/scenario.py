"""
Lease scenario data model.

One LeaseScenario describes a single negotiable lease proposal: rent schedule,
operating-expense structure, parking, concessions and key dates. The engine
reads it; nothing here computes anything.
"""

from __future__ import annotations

import uuid
from datetime import date
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LeaseType(str, Enum):
    FULL_SERVICE = "FS"
    TRIPLE_NET = "NNN"


class ScenarioStatus(str, Enum):
    DRAFT = "Draft"
    ACTIVE = "Active"
    FINAL = "Final"


class EscalationMethod(str, Enum):
    FIXED = "fixed"
    CPI = "cpi"


class AbatementScope(str, Enum):
    BASE_ONLY = "base_only"
    BASE_PLUS_NNN = "base_plus_nnn"


class Granularity(str, Enum):
    ANNUAL = "annual"
    MONTHLY = "monthly"


class OptionType(str, Enum):
    RENEWAL = "Renewal"
    EXPANSION = "Expansion"
    TERMINATION = "Termination"
    ROFR = "ROFR"
    ROFO = "ROFO"


_LEASE_TYPE_ALIASES = {
    "fs": LeaseType.FULL_SERVICE,
    "full service": LeaseType.FULL_SERVICE,
    "full service gross": LeaseType.FULL_SERVICE,
    "gross": LeaseType.FULL_SERVICE,
    "nnn": LeaseType.TRIPLE_NET,
    "triple net": LeaseType.TRIPLE_NET,
    "net": LeaseType.TRIPLE_NET,
}


def _coerce_lease_type(value: Any) -> LeaseType:
    """Coerce casing and spelling variants so fs/nnn/full_service never 422."""
    if isinstance(value, LeaseType):
        return value
    if value is None:
        return LeaseType.FULL_SERVICE
    s = str(value).strip().lower().replace("-", " ").replace("_", " ")
    return _LEASE_TYPE_ALIASES.get(s, LeaseType.FULL_SERVICE)


class RentPeriod(BaseModel):
    """
    One row of the rent schedule.

    rent_psf is the annual base rate at period_start, before escalation.
    Free rent applies once, at the start of the period.
    """
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    period_start: date
    period_end: date
    rent_psf: float = Field(ge=0.0, description="Base rent $/RSF/year at period start")
    escalation_percentage: float = Field(default=0.0, description="Annual escalation, e.g. 0.03")
    free_rent_months: int = Field(default=0, ge=0, description="Clamped to 0-12 when applied")
    abatement_applies_to: AbatementScope = AbatementScope.BASE_ONLY

    @field_validator("escalation_percentage", "free_rent_months", mode="before")
    @classmethod
    def none_to_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class KeyDates(BaseModel):
    commencement: date
    rent_start: Optional[date] = None
    expiration: date
    early_access: Optional[date] = None

    @model_validator(mode="after")
    def default_rent_start(self) -> "KeyDates":
        if self.rent_start is None:
            self.rent_start = self.commencement
        return self


class OperatingConfig(BaseModel):
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    est_op_ex_psf: Optional[float] = Field(default=None, ge=0.0)
    escalation_method: EscalationMethod = EscalationMethod.FIXED
    escalation_value: Optional[float] = None
    # Reserved; not applied by the engine.
    escalation_cap: Optional[float] = None


class Concessions(BaseModel):
    """Informational only; never netted into cash flow."""
    ti_allowance_psf: Optional[float] = Field(default=None, ge=0.0)
    moving_allowance: Optional[float] = Field(default=None, ge=0.0)
    other_credits: Optional[float] = Field(default=None, ge=0.0)


class ParkingConfig(BaseModel):
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    monthly_rate_per_stall: Optional[float] = Field(default=None, ge=0.0)
    stalls: Optional[int] = Field(default=None, ge=0)
    escalation_method: EscalationMethod = EscalationMethod.FIXED
    escalation_value: Optional[float] = None


class CashflowSettings(BaseModel):
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    discount_rate: float = Field(default=0.08, gt=-1.0)
    granularity: Granularity = Granularity.ANNUAL


class LeaseOption(BaseModel):
    """Renewal / expansion / termination / ROFR / ROFO window."""
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    type: OptionType
    window_open: date
    window_close: date
    terms: Optional[str] = None


class LeaseScenario(BaseModel):
    """
    One lease proposal as the engine sees it.

    Every field the engine consumes is declared here; unknown keys in the
    input are dropped rather than carried along.
    """
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    status: ScenarioStatus = ScenarioStatus.DRAFT
    tenant_name: str = ""
    market: str = ""
    rsf: float = Field(ge=0.0, description="Rentable square feet")

    lease_type: LeaseType = LeaseType.FULL_SERVICE
    base_year: Optional[int] = Field(default=None, ge=1, description="FS only")
    expense_stop_psf: Optional[float] = Field(default=None, ge=0.0, description="NNN only")

    key_dates: KeyDates
    operating: OperatingConfig = Field(default_factory=OperatingConfig)
    rent_schedule: List[RentPeriod] = Field(default_factory=list)
    concessions: Concessions = Field(default_factory=Concessions)
    parking: Optional[ParkingConfig] = None
    options: List[LeaseOption] = Field(default_factory=list)
    cashflow_settings: CashflowSettings = Field(default_factory=CashflowSettings)
    notes: str = ""

    @field_validator("lease_type", mode="before")
    @classmethod
    def coerce_lease_type(cls, v: Any) -> LeaseType:
        return _coerce_lease_type(v)

    @field_validator("operating", "concessions", "cashflow_settings", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("rent_schedule", "options", mode="before")
    @classmethod
    def none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v
