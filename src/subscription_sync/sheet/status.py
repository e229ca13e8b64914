from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Workflow status derivation.

Rules are evaluated in priority order and the first match wins:

1. payment actual present            -> Paid
2. approval status "approved"        -> Approved
3. approval status "rejected"        -> Rejected
4. stage-2 actual present            -> Approved (implicit approval)
5. otherwise                         -> Pending

Payment is terminal and overrides a stale or contradictory approval text.
"""

__all__ = [
    "SubscriptionStatus",
    "WorkflowSignals",
    "derive_status",
]


class SubscriptionStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    PAID = "Paid"


@dataclass(frozen=True)
class WorkflowSignals:
    """Workflow columns relevant to status (already trimmed text)."""
    payment_actual: str = ""  # Actual 3
    approval_status: str = ""
    stage2_actual: str = ""  # Actual 2


def derive_status(signals: WorkflowSignals) -> SubscriptionStatus:
    if signals.payment_actual:
        return SubscriptionStatus.PAID
    approval = signals.approval_status.lower()
    if approval == "approved":
        return SubscriptionStatus.APPROVED
    if approval == "rejected":
        return SubscriptionStatus.REJECTED
    if signals.stage2_actual:
        return SubscriptionStatus.APPROVED
    return SubscriptionStatus.PENDING
