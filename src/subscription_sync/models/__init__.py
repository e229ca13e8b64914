"""Domain models for the subscription sync tool."""

from .config_models import SyncConfig
from .error_record import ErrorRecord
from .subscription_record import SubscriptionRecord
from .sync_result import SyncResult

__all__ = [
    # Configuration models
    "SyncConfig",
    # Processing models
    "ErrorRecord",
    "SubscriptionRecord",
    "SyncResult",
]
