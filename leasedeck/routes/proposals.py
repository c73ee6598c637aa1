"""
Proposal endpoints: snapshot, duplicate and compare landlord/tenant proposals.
No state is kept server-side; callers own persistence.
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from leasedeck.demo_scenarios import base_scenario, demo_proposals
from leasedeck.models import (
    CompareProposalsRequest,
    CreateProposalRequest,
    DuplicateProposalRequest,
    LeaseScenario,
    Proposal,
    ProposalComparisonResponse,
)
from leasedeck.services.proposals import compare_proposals, create_proposal, duplicate_proposal

router = APIRouter(tags=["proposals"])

_LOG = logging.getLogger("uvicorn.error")


@router.post("/proposals", response_model=Proposal)
def create_proposal_endpoint(req: CreateProposalRequest) -> Proposal:
    """Snapshot the posted scenario as a new landlord or tenant proposal."""
    proposal = create_proposal(req.scenario, req.side, req.label)
    _LOG.info("PROPOSAL_CREATED id=%s side=%s scenario=%s", proposal.id, proposal.side, req.scenario.id)
    return proposal


@router.post("/proposals/duplicate", response_model=Proposal)
def duplicate_proposal_endpoint(req: DuplicateProposalRequest) -> Proposal:
    copy = duplicate_proposal(req.proposal, req.label)
    _LOG.info("PROPOSAL_DUPLICATED source=%s id=%s", req.proposal.id, copy.id)
    return copy


@router.post("/proposals/compare", response_model=ProposalComparisonResponse)
def compare_proposals_endpoint(req: CompareProposalsRequest) -> ProposalComparisonResponse:
    """Side-by-side metrics; the first proposal is the baseline for deltas."""
    if not req.proposals:
        raise HTTPException(status_code=400, detail="At least one proposal is required.")
    rows = compare_proposals(req.proposals)
    _LOG.info("PROPOSAL_COMPARE count=%s", len(rows))
    return ProposalComparisonResponse(rows=rows)


@router.get("/demo/scenario", response_model=LeaseScenario)
def demo_scenario_endpoint() -> LeaseScenario:
    return base_scenario()


@router.get("/demo/proposals", response_model=List[Proposal])
def demo_proposals_endpoint() -> List[Proposal]:
    return demo_proposals()
