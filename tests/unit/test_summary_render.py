from __future__ import annotations

import re
from datetime import datetime, timezone

from subscription_sync.models.sync_result import SyncResult
from subscription_sync.services.summary import render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY rows=([0-9]+) records=([0-9]+) skipped=([0-9]+) "
    r"pending=([0-9]+) approved=([0-9]+) rejected=([0-9]+) paid=([0-9]+) "
    r"elapsed_sec=([0-9]+\.?[0-9]*)$"
)

START = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


def _result(elapsed: float = 2.0, **counts: int) -> SyncResult:
    status_counts = {"Pending": 0, "Approved": 0, "Rejected": 0, "Paid": 0}
    status_counts.update(counts)
    records = sum(status_counts.values())
    return SyncResult(
        total_rows=records + 2,
        record_count=records,
        skipped_rows=2,
        status_counts=status_counts,
        start_time=START,
        end_time=START,
        elapsed_seconds=elapsed,
    )


def test_render_summary_line_fields():
    line = render_summary_line(_result(Pending=3, Approved=2, Rejected=1, Paid=4))
    match = SUMMARY_PATTERN.match(line)
    assert match, line
    assert match.groups() == ("12", "10", "2", "3", "2", "1", "4", "2")


def test_render_summary_line_missing_status_counts_as_zero():
    result = SyncResult(
        total_rows=1, record_count=1, skipped_rows=0, status_counts={"Paid": 1},
        start_time=START, end_time=START, elapsed_seconds=0.0,
    )
    line = render_summary_line(result)
    assert "pending=0 approved=0 rejected=0 paid=1" in line
    assert line.endswith("elapsed_sec=0")


def test_render_summary_line_small_elapsed_avoids_scientific_notation():
    line = render_summary_line(_result(elapsed=0.000012))
    assert SUMMARY_PATTERN.match(line), line
    assert "e-" not in line
    assert line.endswith("elapsed_sec=0.000012")


def test_render_summary_line_rounds_elapsed():
    assert render_summary_line(_result(elapsed=1.23456)).endswith("elapsed_sec=1.235")
