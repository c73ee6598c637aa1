"""Proposal services."""

from leasedeck.services.proposals import (
    compare_proposals,
    create_proposal,
    duplicate_proposal,
)

__all__ = [
    "compare_proposals",
    "create_proposal",
    "duplicate_proposal",
]
