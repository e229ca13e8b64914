from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .subscription_record import SubscriptionRecord

"""Aggregated result of one synchronization run (records + counters for SUMMARY)."""


@dataclass(frozen=True)
class SyncResult:
    total_rows: int  # data rows after the header was stripped
    record_count: int
    skipped_rows: int  # rows rejected by the row filter
    status_counts: dict[str, int]  # status value -> count
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    records: list[SubscriptionRecord] = field(default_factory=list)

    def count(self, status: str) -> int:
        return self.status_counts.get(status, 0)
