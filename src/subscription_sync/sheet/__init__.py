"""Per-row building blocks of the sync pipeline: column table, filter, normalizer, status, assembler."""

from .assembler import assemble_record, make_record_id
from .columns import DEFAULT_COLUMNS, ColumnMap
from .normalize import DEFAULT_TEXT, normalize_serial, normalize_timestamp, to_text
from .row_filter import is_usable_row, rejection_reason
from .status import SubscriptionStatus, WorkflowSignals, derive_status

__all__ = [
    "ColumnMap",
    "DEFAULT_COLUMNS",
    "DEFAULT_TEXT",
    "SubscriptionStatus",
    "WorkflowSignals",
    "assemble_record",
    "derive_status",
    "is_usable_row",
    "make_record_id",
    "normalize_serial",
    "normalize_timestamp",
    "rejection_reason",
    "to_text",
]
