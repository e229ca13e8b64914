"""Spreadsheet-backed subscription record sync.

Raw sheet rows -> row filter -> field normalizer + status derivation ->
record assembler -> ordered SubscriptionRecords.
"""

from .models.subscription_record import SubscriptionRecord
from .services.orchestrator import run_sync, synchronize
from .sheet.status import SubscriptionStatus

__all__ = [
    "SubscriptionRecord",
    "SubscriptionStatus",
    "run_sync",
    "synchronize",
]

__version__ = "0.1.0"
