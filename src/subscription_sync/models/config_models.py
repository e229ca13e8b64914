from __future__ import annotations

from dataclasses import dataclass, field

from ..sheet.columns import DEFAULT_COLUMNS, ColumnMap
from ..sheet.normalize import DEFAULT_TEXT

"""Config dataclass for the subscription sync tool.

Kept separate from the loader in subscription_sync/config/loader.py so that the
pipeline can be configured in code (tests, notebooks) without a YAML file.
"""

DEFAULT_SHEET = "Subscription"


@dataclass(frozen=True)
class SyncConfig:
    """Root configuration for a synchronization run.

    endpoint_url is optional here: it is only needed when rows come from the
    web endpoint, not when reading a workbook export.
    """
    endpoint_url: str | None = None  # Apps Script web app URL
    sheet: str = DEFAULT_SHEET
    timezone: str | None = None  # display timezone for timestamps; None = host local time
    timeout_seconds: float = 30.0
    default_text: str = DEFAULT_TEXT  # 空セル時の表示用デフォルト
    columns: ColumnMap = field(default_factory=lambda: DEFAULT_COLUMNS)
