"""
Proposal snapshots: create, duplicate and compare landlord/tenant proposals.

Each proposal owns a deep copy of its scenario so later edits to one
proposal never leak into another.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from leasedeck.engine import analyze_scenario
from leasedeck.models import (
    LeaseScenario,
    Proposal,
    ProposalSide,
    ProposalSummary,
)


def _side_value(side: ProposalSide | str) -> str:
    return ProposalSide(side).value


def create_proposal(
    scenario: LeaseScenario,
    side: ProposalSide | str,
    label: Optional[str] = None,
) -> Proposal:
    """Snapshot `scenario` as a new proposal for `side` (label defaults to '<side> v1')."""
    side_value = _side_value(side)
    return Proposal(
        id=str(uuid.uuid4()),
        side=side_value,
        label=label or f"{side_value} v1",
        created_at=datetime.now(timezone.utc),
        meta=scenario.model_copy(deep=True),
    )


def duplicate_proposal(proposal: Proposal, label: Optional[str] = None) -> Proposal:
    """Copy a proposal under a new id and timestamp; meta is cloned, not shared."""
    base_label = proposal.label or f"{_side_value(proposal.side)} v1"
    return Proposal(
        id=str(uuid.uuid4()),
        side=proposal.side,
        label=label or f"{base_label} (copy)",
        created_at=datetime.now(timezone.utc),
        meta=proposal.meta.model_copy(deep=True),
    )


def compare_proposals(proposals: Sequence[Proposal]) -> List[ProposalSummary]:
    """
    Analyze each proposal and report its metrics side by side.

    Deltas are measured against the first proposal, which is the baseline.
    """
    rows: List[ProposalSummary] = []
    baseline = None
    for proposal in proposals:
        result = analyze_scenario(proposal.meta)
        metrics = result.metrics
        if baseline is None:
            baseline = metrics
        rows.append(
            ProposalSummary(
                proposal_id=proposal.id,
                side=_side_value(proposal.side),
                label=proposal.label,
                scenario_name=proposal.meta.name,
                metrics=metrics,
                total_net_cash_flow=sum(line.net_cash_flow for line in result.lines),
                npv_delta=metrics.npv - baseline.npv,
                effective_rate_delta=metrics.effective_rate - baseline.effective_rate,
            )
        )
    return rows
