from __future__ import annotations

from ..models.sync_result import SyncResult
from ..sheet.status import SubscriptionStatus

"""SUMMARY line rendering.

Format:
SUMMARY rows={total} records={records} skipped={skipped} pending={p}
approved={a} rejected={r} paid={d} elapsed_sec={elapsed}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Format very small numbers to avoid scientific notation
        return f"{value:.6f}".rstrip('0').rstrip('.')
    return str(round(value, 3))


def render_summary_line(result: SyncResult) -> str:
    """Render the SUMMARY line for a sync run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = SyncResult(
        ...     total_rows=5, record_count=4, skipped_rows=1,
        ...     status_counts={"Pending": 1, "Approved": 2, "Rejected": 0, "Paid": 1},
        ...     start_time=t, end_time=t, elapsed_seconds=0.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY rows=5 records=4 skipped=1 pending=1 approved=2 rejected=0 paid=1 elapsed_sec=0'
    """
    per_status = " ".join(
        f"{s.value.lower()}={result.count(s.value)}" for s in SubscriptionStatus
    )
    return (
        f"SUMMARY rows={result.total_rows} "
        f"records={result.record_count} "
        f"skipped={result.skipped_rows} "
        f"{per_status} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
