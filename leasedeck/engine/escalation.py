from __future__ import annotations

from math import pow

from leasedeck.models import EscalationMethod


def escalate(
    value: float,
    n: int,
    method: EscalationMethod | str = EscalationMethod.FIXED,
    rate: float | None = 0.0,
) -> float:
    """
    Compound `value` forward `n` annual periods at `rate`.

    Negative rates are treated as 0 (no de-escalation). CPI is applied with
    the provided rate; no index is consulted, so it matches fixed exactly.
    """
    if n <= 0:
        return value
    r = max(0.0, rate or 0.0)
    return value * pow(1.0 + r, n)
