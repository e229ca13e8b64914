from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from ..fetch import RowSource
from ..fetch.errors import UpstreamUnavailable
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import SyncConfig
from ..models.subscription_record import SubscriptionRecord
from ..models.sync_result import SyncResult
from ..sheet.assembler import assemble_record
from ..sheet.columns import DEFAULT_COLUMNS, ColumnMap
from ..sheet.normalize import DEFAULT_TEXT
from ..sheet.row_filter import rejection_reason
from ..sheet.status import SubscriptionStatus
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Sync orchestration.

synchronize() is the pure pipeline: rows in, records out, no I/O.
run_sync() wraps it with the row source, header stripping, error logging and
the counters used for the SUMMARY line.
"""

__all__ = [
    "run_sync",
    "synchronize",
]

HEADER_ROWS = 1


def synchronize(
    raw_rows: Sequence[Any],
    columns: ColumnMap = DEFAULT_COLUMNS,
    *,
    timezone: str | None = None,
    default_text: str = DEFAULT_TEXT,
    progress: ProgressTracker | None = None,
    start: int = 0,
) -> list[SubscriptionRecord]:
    """Turn header-stripped sheet rows into SubscriptionRecords.

    Unusable rows are dropped; surviving rows keep their relative order. The
    position used in each record id is the row's index in `raw_rows`
    counted from `start`. A malformed row never raises.

    Args:
        raw_rows: Data rows (header row already removed)
        columns: Column table for the sheet layout
        timezone: Display timezone for normalized timestamps (None: host local time)
        default_text: Substitute for empty descriptive fields
        progress: Optional tracker advanced once per row
        start: Sheet position of the first row in `raw_rows`

    Returns:
        Records in input order
    """
    records: list[SubscriptionRecord] = []
    for index, row in enumerate(raw_rows, start=start):
        reason = rejection_reason(row, columns)
        if reason is not None:
            logger.debug(f"skip row={index} reason={reason}")
            if progress is not None:
                progress.advance(kept=False)
            continue
        records.append(
            assemble_record(row, index, columns, timezone=timezone, default_text=default_text)
        )
        if progress is not None:
            progress.advance(kept=True)
    return records


def _status_counts(records: Sequence[SubscriptionRecord]) -> dict[str, int]:
    counts = Counter(r.status for r in records)
    # 0 件のステータスも SUMMARY に出すため全キーを揃える
    return {s.value: counts.get(s.value, 0) for s in SubscriptionStatus}


def run_sync(
    config: SyncConfig,
    source: RowSource,
    error_log: ErrorLogBuffer | None = None,
) -> SyncResult:
    """Fetch rows from `source`, strip the header row and run the pipeline.

    Raises:
        UpstreamUnavailable: the source failed; recorded in the error log first
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()

    try:
        rows = source.fetch_rows(config.sheet)
    except UpstreamUnavailable as e:
        error_log.append(
            ErrorRecord.create(
                source=source.source_name,
                sheet=config.sheet,
                row=-1,
                error_type="UPSTREAM_UNAVAILABLE",
                message=str(e),
            )
        )
        try:
            error_log.flush()
        except OSError as flush_err:
            # Don't mask the upstream failure with a log write failure
            logger.warning(f"error log flush failed: {flush_err}")
        raise

    # row 0 はヘッダ行。id の位置はシート上の行番号のまま
    data_rows = rows[HEADER_ROWS:]
    logger.info(f"sheet={config.sheet} data_rows={len(data_rows)}")

    with ProgressTracker(len(data_rows), description=f"Syncing {config.sheet}") as progress:
        records = synchronize(
            data_rows,
            config.columns,
            timezone=config.timezone,
            default_text=config.default_text,
            progress=progress,
            start=HEADER_ROWS,
        )
        progress.set_postfix(records=len(records))

    end_time = datetime.now(UTC)
    return SyncResult(
        total_rows=len(data_rows),
        record_count=len(records),
        skipped_rows=len(data_rows) - len(records),
        status_counts=_status_counts(records),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        records=records,
    )
