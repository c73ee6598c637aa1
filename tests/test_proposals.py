from datetime import date, datetime

import pytest

from leasedeck.demo_scenarios import base_scenario, demo_proposals
from leasedeck.engine import analyze_scenario
from leasedeck.models import ProposalSide, RentPeriod
from leasedeck.services.proposals import compare_proposals, create_proposal, duplicate_proposal


def test_create_proposal_snapshots_a_private_copy() -> None:
    scenario = base_scenario()
    proposal = create_proposal(scenario, ProposalSide.LANDLORD)

    assert proposal.side == "Landlord"
    assert proposal.label == "Landlord v1"
    assert isinstance(proposal.created_at, datetime)
    assert proposal.meta is not scenario
    assert proposal.meta.model_dump() == scenario.model_dump()

    # Editing the source after the snapshot never reaches the proposal.
    scenario.rent_schedule[0].rent_psf = 99
    scenario.name = "Edited"
    assert proposal.meta.rent_schedule[0].rent_psf == 48
    assert proposal.meta.name == "Demo - 20k RSF Class A"


def test_create_proposal_accepts_side_string_and_label() -> None:
    proposal = create_proposal(base_scenario(), "Tenant", "Tenant Counter 2")
    assert proposal.side == "Tenant"
    assert proposal.label == "Tenant Counter 2"


def test_proposals_from_one_scenario_do_not_share_meta() -> None:
    scenario = base_scenario()
    landlord = create_proposal(scenario, ProposalSide.LANDLORD)
    tenant = create_proposal(scenario, ProposalSide.TENANT)
    assert landlord.id != tenant.id
    assert landlord.meta is not tenant.meta

    tenant.meta.rent_schedule.append(
        RentPeriod(period_start=date(2036, 1, 1), period_end=date(2036, 12, 31), rent_psf=60)
    )
    tenant.meta.parking.stalls = 10
    assert len(landlord.meta.rent_schedule) == 3
    assert landlord.meta.parking.stalls == 40
    assert len(scenario.rent_schedule) == 3


def test_duplicate_proposal_clones_meta_under_new_identity() -> None:
    original = create_proposal(base_scenario(), ProposalSide.LANDLORD, "LL v1")
    copy = duplicate_proposal(original)
    assert copy.id != original.id
    assert copy.side == original.side
    assert copy.label == "LL v1 (copy)"
    assert copy.meta is not original.meta
    assert copy.meta.model_dump() == original.meta.model_dump()

    copy.meta.rent_schedule[0].free_rent_months = 0
    assert original.meta.rent_schedule[0].free_rent_months == 6

    relabeled = duplicate_proposal(original, "LL v2")
    assert relabeled.label == "LL v2"


def test_compare_proposals_reports_deltas_against_first() -> None:
    landlord, tenant = demo_proposals()
    rows = compare_proposals([landlord, tenant])
    assert [row.proposal_id for row in rows] == [landlord.id, tenant.id]
    assert [row.side for row in rows] == ["Landlord", "Tenant"]

    baseline, counter = rows
    assert baseline.npv_delta == 0
    assert baseline.effective_rate_delta == 0

    expected_landlord = analyze_scenario(landlord.meta).metrics
    expected_tenant = analyze_scenario(tenant.meta).metrics
    assert baseline.metrics.npv == pytest.approx(expected_landlord.npv)
    assert counter.npv_delta == pytest.approx(expected_tenant.npv - expected_landlord.npv)
    assert counter.effective_rate_delta == pytest.approx(
        expected_tenant.effective_rate - expected_landlord.effective_rate
    )
    assert counter.scenario_name == "Tenant Counter v1"


def test_compare_proposals_is_repeatable() -> None:
    proposals = demo_proposals()
    first = [row.model_dump() for row in compare_proposals(proposals)]
    second = [row.model_dump() for row in compare_proposals(proposals)]
    assert first == second


def test_compare_no_proposals_is_empty() -> None:
    assert compare_proposals([]) == []


def test_demo_proposals_pair() -> None:
    landlord, tenant = demo_proposals()
    assert landlord.label == "LL v1"
    assert tenant.label == "Tenant Counter 1"
    assert landlord.meta.name == "Landlord Proposal v1"
    assert [p.rent_psf for p in tenant.meta.rent_schedule] == [47, 50, 54]
    assert tenant.meta.rent_schedule[0].free_rent_months == 3
    assert tenant.meta.rent_schedule[0].abatement_applies_to == "base_only"
    assert landlord.meta.rent_schedule[0].abatement_applies_to == "base_plus_nnn"
