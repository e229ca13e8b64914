from __future__ import annotations

import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from .errors import UpstreamUnavailable

"""Workbook row source: reads a downloaded export of the sheet.

.xlsx files are read sheet-by-name; .csv exports are a single sheet so the
sheet name is ignored. Rows are returned raw (no header inference) so the same
pipeline applies as for the web endpoint:

- empty cells -> None
- datetime cells -> ISO strings (the web endpoint serializes dates the same way)
- "NA"/"N/A" text stays text (pandas' default NA conversion is disabled)
"""

__all__ = [
    "WorkbookSource",
    "frame_to_rows",
]

logger = logging.getLogger(__name__)


def _cell(value: Any) -> Any:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return None
    if isinstance(value, (pd.Timestamp, datetime)):
        return value.isoformat()
    return value


def frame_to_rows(df: pd.DataFrame) -> list[list[Any]]:
    """Convert a headerless DataFrame to positional rows."""
    return [[_cell(v) for v in raw] for raw in df.itertuples(index=False, name=None)]


class WorkbookSource:
    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def source_name(self) -> str:
        return str(self._path)

    def fetch_rows(self, sheet: str) -> list[list[Any]]:
        """Read every row of `sheet`, header row included.

        Raises:
            UpstreamUnavailable: file missing/unreadable or sheet not found
        """
        if not self._path.exists():
            raise UpstreamUnavailable(f"workbook not found: {self._path}", source=self.source_name)
        try:
            if self._path.suffix.lower() == ".csv":
                df = pd.read_csv(self._path, header=None, dtype=str, keep_default_na=False)
            else:
                df = pd.read_excel(
                    self._path,
                    sheet_name=sheet,
                    header=None,
                    dtype=object,
                    keep_default_na=False,
                )
        except pd.errors.EmptyDataError:
            logger.debug(f"empty export: {self._path}")
            return []
        except (OSError, ValueError, zipfile.BadZipFile) as e:
            raise UpstreamUnavailable(
                f"cannot read sheet '{sheet}' from {self._path}: {e}", source=self.source_name
            ) from e
        rows = frame_to_rows(df)
        logger.debug(f"read {len(rows)} rows from {self._path.name}")
        return rows
