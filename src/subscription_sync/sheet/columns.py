from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from typing import Any

"""Column table for the upstream "Subscription" sheet.

The upstream sheet has no negotiated schema: column position IS the schema.
All positional knowledge lives in ColumnMap so that a layout change upstream
only touches this table (or the `columns:` section of config/sync.yml).
"""

__all__ = [
    "ColumnMap",
    "DEFAULT_COLUMNS",
]


@dataclass(frozen=True)
class ColumnMap:
    """Logical field -> zero-based column index."""
    requested_date: int = 0  # A
    serial_number: int = 1  # B
    company_name: int = 2  # C
    subscriber_name: int = 3  # D
    subscription_name: int = 4  # E
    price: int = 5  # F
    frequency: int = 6  # G
    purpose: int = 7  # H
    planned1: int = 8  # I (Planned 1)
    actual1: int = 9  # J (Actual 1)
    renewal_status: int = 11  # L
    renewal_count: int = 12  # M
    planned2: int = 13  # N (Planned 2)
    actual2: int = 14  # O (Actual 2)
    approval_status: int = 16  # Q
    actual3: int = 18  # S (Payment)
    transaction_id: int = 19  # T
    start_date: int = 20  # U
    end_date: int = 21  # V
    payment_file: int = 22  # W

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, int] | None) -> ColumnMap:
        """Build a map from defaults plus per-field index overrides.

        Raises:
            ValueError: unknown field name or negative index
        """
        if not overrides:
            return cls()
        known = set(cls.field_names())
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"unknown column fields: {unknown}")
        for name, index in overrides.items():
            if isinstance(index, bool) or not isinstance(index, int) or index < 0:
                raise ValueError(f"column index for '{name}' must be a non-negative integer")
        return replace(cls(), **dict(overrides))

    def cell(self, row: Sequence[Any], field_name: str) -> Any:
        """Return the raw cell for `field_name`, or None when the row is too short."""
        index = getattr(self, field_name)
        if index < len(row):
            return row[index]
        return None


DEFAULT_COLUMNS = ColumnMap()
