"""Lease Deck: commercial lease proposal economics."""

__version__ = "0.1.0"
