# Shared pytest fixtures
from __future__ import annotations

import os
import tempfile
import time
from pathlib import Path
from typing import Any, Callable

import pytest

from subscription_sync.logging.init import reset_logging
from subscription_sync.sheet.columns import DEFAULT_COLUMNS

ROW_WIDTH = 23  # A..W

HEADER_ROW = [
    "Timestamp", "Serial No", "Company Name", "Subscriber Name", "Subscription Name",
    "Price", "Frequency", "Purpose", "Planned 1", "Actual 1", "Delay 1",
    "Renewal Status", "Renewal Count", "Planned 2", "Actual 2", "Delay 2",
    "Approval Status", "Planned 3", "Actual 3", "Transaction ID",
    "Start Date", "End Date", "Payment File",
]


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # 開発者の .env / シェル環境がテストに混入しないように
    monkeypatch.delenv("SUBSCRIPTION_SCRIPT_URL", raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """endpoint_url: null
sheet: Subscription
timezone: UTC
timeout_seconds: 10
default_text: N/A
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "sync.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def make_row() -> Callable[..., list[Any]]:
    """Build a full-width sheet row from field-name keyword arguments."""
    def _make(**cells: Any) -> list[Any]:
        row: list[Any] = [""] * ROW_WIDTH
        for name, value in cells.items():
            row[getattr(DEFAULT_COLUMNS, name)] = value
        return row
    return _make


@pytest.fixture()
def header_row() -> list[str]:
    return list(HEADER_ROW)


@pytest.fixture()
def host_timezone() -> Callable[[str], None]:
    """Switch the process-local timezone (TZ + time.tzset) for one test.

    Use POSIX TZ strings ("JST-9", "EST5") so no tz database is needed.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    saved = os.environ.get("TZ")

    def _set(name: str) -> None:
        os.environ["TZ"] = name
        time.tzset()

    yield _set
    if saved is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = saved
    time.tzset()
