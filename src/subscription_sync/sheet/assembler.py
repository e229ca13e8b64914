from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.subscription_record import SubscriptionRecord
from .columns import DEFAULT_COLUMNS, ColumnMap
from .normalize import DEFAULT_TEXT, normalize_serial, normalize_timestamp, to_text
from .status import WorkflowSignals, derive_status

"""Record assembly: one usable row -> one SubscriptionRecord.

The caller is expected to have passed the row through the row filter already.
"""

__all__ = [
    "ID_PREFIX",
    "assemble_record",
    "make_record_id",
]

ID_PREFIX = "sub"


def make_record_id(serial: str, index: int) -> str:
    """Composite id; the row position keeps duplicate serials distinct."""
    return f"{ID_PREFIX}-{serial}-{index}"


def assemble_record(
    row: Sequence[Any],
    index: int,
    columns: ColumnMap = DEFAULT_COLUMNS,
    *,
    timezone: str | None = None,
    default_text: str = DEFAULT_TEXT,
) -> SubscriptionRecord:
    """Build a SubscriptionRecord from a raw row at zero-based position `index`."""

    def text(field_name: str, default: str = "") -> str:
        return to_text(columns.cell(row, field_name), default)

    serial = normalize_serial(text("serial_number"))

    actual2 = text("actual2")
    actual3 = text("actual3")
    status = derive_status(
        WorkflowSignals(
            payment_actual=actual3,
            approval_status=text("approval_status"),
            stage2_actual=actual2,
        )
    )

    return SubscriptionRecord(
        id=make_record_id(serial, index),
        serial_number=serial,
        requested_date=normalize_timestamp(text("requested_date"), timezone),
        company_name=text("company_name", default_text),
        subscriber_name=text("subscriber_name", default_text),
        subscription_name=text("subscription_name", default_text),
        price=text("price", default_text),
        frequency=text("frequency", default_text),
        purpose=text("purpose", default_text),
        status=status.value,
        start_date=text("start_date"),
        end_date=text("end_date"),
        payment_date=actual3,
        payment_method="",
        transaction_id=text("transaction_id"),
        payment_file=text("payment_file"),
        approval_date="",
        remarks="",
        actual2=actual2,
        actual3=actual3,
        renewal_status=text("renewal_status"),
        planned1=text("planned1"),
        planned2=text("planned2"),
        actual1=text("actual1"),
        renewal_count=text("renewal_count", "0"),
    )
