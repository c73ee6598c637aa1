"""
Proposal snapshots and the request bodies of the proposal endpoints.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .scenario import LeaseScenario


class ProposalSide(str, Enum):
    LANDLORD = "Landlord"
    TENANT = "Tenant"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Proposal(BaseModel):
    """
    One side's snapshot of a lease scenario.

    meta is owned by this proposal alone; build proposals through
    services.proposals so the scenario is deep-copied.
    """
    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    side: ProposalSide
    label: str = ""
    created_at: datetime = Field(default_factory=_utc_now)
    meta: LeaseScenario


class CreateProposalRequest(BaseModel):
    scenario: LeaseScenario
    side: ProposalSide
    label: Optional[str] = None


class DuplicateProposalRequest(BaseModel):
    proposal: Proposal
    label: Optional[str] = None


class CompareProposalsRequest(BaseModel):
    proposals: List[Proposal] = Field(default_factory=list)
