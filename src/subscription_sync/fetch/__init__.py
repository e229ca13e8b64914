"""Row sources: where raw sheet rows come from before the pipeline runs."""

from __future__ import annotations

from typing import Any, Protocol

from .client import SheetClient
from .errors import UpstreamUnavailable
from .workbook import WorkbookSource

__all__ = [
    "RowSource",
    "SheetClient",
    "UpstreamUnavailable",
    "WorkbookSource",
]


class RowSource(Protocol):
    """Anything that can deliver the raw rows of a sheet (header row included)."""

    @property
    def source_name(self) -> str: ...

    def fetch_rows(self, sheet: str) -> list[list[Any]]: ...
