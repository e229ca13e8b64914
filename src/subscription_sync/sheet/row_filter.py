from __future__ import annotations

from typing import Any

from .columns import DEFAULT_COLUMNS, ColumnMap
from .normalize import to_text

"""Row filter: drops empty rows, repeated header rows and section markers."""

__all__ = [
    "HEADER_LABEL",
    "SECTION_MARKER",
    "is_usable_row",
    "rejection_reason",
]

HEADER_LABEL = "serial no"
SECTION_MARKER = "create subscription"
MIN_CELLS = 2


def rejection_reason(row: Any, columns: ColumnMap = DEFAULT_COLUMNS) -> str | None:
    """Return why `row` is rejected, or None when it is usable."""
    if not isinstance(row, (list, tuple)) or len(row) < MIN_CELLS:
        return "short_row"

    serial = to_text(columns.cell(row, "serial_number"))
    if not serial:
        return "empty_serial"
    lowered = serial.lower()
    if lowered == HEADER_LABEL:
        return "header_row"
    if SECTION_MARKER in lowered:
        return "section_marker"

    company = to_text(columns.cell(row, "company_name"))
    subscription = to_text(columns.cell(row, "subscription_name"))
    if not company and not subscription:
        return "missing_names"
    return None


def is_usable_row(row: Any, columns: ColumnMap = DEFAULT_COLUMNS) -> bool:
    return rejection_reason(row, columns) is None
