from __future__ import annotations

import re
from typing import Any

import pandas as pd

"""Field normalization for raw sheet cells.

Every function here is total: arbitrary cell input never raises. The sheet is
maintained by hand, so malformed values are passed through as text instead of
being rejected.
"""

__all__ = [
    "DEFAULT_TEXT",
    "TIMESTAMP_FORMAT",
    "to_text",
    "normalize_serial",
    "normalize_timestamp",
]

DEFAULT_TEXT = "N/A"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

SERIAL_PREFIX = "SN-"
SERIAL_WIDTH = 3

# ASCII digits only (Unicode digits are not serial numbers)
_DIGITS = re.compile(r"[0-9]+")


def _is_missing(value: Any) -> bool:
    # pd.isna はリスト等を渡すと配列を返すのでスカラーのみ判定
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def to_text(value: Any, default: str = "") -> str:
    """Coerce a cell to trimmed text.

    None / NaN / NaT become empty. `default` replaces an empty result.

    Examples:
        >>> to_text("  Acme ")
        'Acme'
        >>> to_text(100.0)
        '100'
        >>> to_text(None, default="N/A")
        'N/A'
    """
    if _is_missing(value):
        text = ""
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value).strip()
    return text or default


def normalize_serial(text: str) -> str:
    """Normalize a serial number to the "SN-XXX" form.

    The first run of digits anywhere in the text is zero-padded to 3 digits.
    Text without digits is returned trimmed but otherwise unchanged.

    Examples:
        >>> normalize_serial("SN7")
        'SN-007'
        >>> normalize_serial("Order-7")
        'SN-007'
        >>> normalize_serial("SN-007")
        'SN-007'
        >>> normalize_serial("draft")
        'draft'
    """
    stripped = text.strip()
    match = _DIGITS.search(stripped)
    if match is None:
        return stripped
    return f"{SERIAL_PREFIX}{match.group(0).zfill(SERIAL_WIDTH)}"


def normalize_timestamp(text: str, timezone: str | None = None) -> str:
    """Reformat an ISO-8601 timestamp to "YYYY-MM-DD HH:MM".

    Only text containing "T" or "Z" is treated as a timestamp. Timezone-aware
    values are converted to `timezone`, or to the host's local time when
    `timezone` is None; naive values keep their wall-clock time.
    Anything that fails to parse is returned unchanged.

    Examples:
        >>> normalize_timestamp("2024-03-05T10:15:00Z", "UTC")
        '2024-03-05 10:15'
        >>> normalize_timestamp("March 5")
        'March 5'
    """
    if not text:
        return ""
    if "T" not in text and "Z" not in text:
        return text
    try:
        ts = pd.to_datetime(text, format="ISO8601")
        if pd.isna(ts):
            return text
        if ts.tzinfo is None:
            return ts.strftime(TIMESTAMP_FORMAT)
        if timezone is None:
            # ホストのローカル時刻 (TZ 環境変数に従う)
            return ts.to_pydatetime().astimezone().strftime(TIMESTAMP_FORMAT)
        return ts.tz_convert(timezone).strftime(TIMESTAMP_FORMAT)
    except (ValueError, TypeError, OverflowError, KeyError):
        # KeyError: unknown timezone name (ZoneInfoNotFoundError)
        return text
