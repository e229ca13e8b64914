from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

from subscription_sync.fetch.errors import UpstreamUnavailable
from subscription_sync.fetch.workbook import WorkbookSource, frame_to_rows


def _make_excel(tmp_path: Path, name: str, sheets: dict[str, list[list[object]]]) -> Path:
    p = tmp_path / name
    with pd.ExcelWriter(p, engine="openpyxl") as writer:
        for sheet, rows in sheets.items():
            df = pd.DataFrame(rows)
            df.to_excel(writer, sheet_name=sheet, header=False, index=False)
    return p


def test_read_xlsx_rows_header_included(temp_workdir: Path):
    excel = _make_excel(
        temp_workdir / "data", "export.xlsx",
        {
            "Subscription": [
                ["Timestamp", "Serial No", "Company Name"],
                [datetime(2024, 3, 5, 10, 15), "SN7", "Acme"],
                [None, 12, "N/A"],
            ],
            "Other": [["x"]],
        },
    )
    rows = WorkbookSource(excel).fetch_rows("Subscription")
    assert rows[0] == ["Timestamp", "Serial No", "Company Name"]
    # datetime セルは ISO 文字列化される
    assert rows[1][0] == "2024-03-05T10:15:00"
    assert rows[1][1:] == ["SN7", "Acme"]
    assert rows[2][0] in (None, "")
    assert rows[2][1] == 12
    # "N/A" は NaN 変換されない
    assert rows[2][2] == "N/A"


def test_read_xlsx_missing_sheet(temp_workdir: Path):
    excel = _make_excel(temp_workdir / "data", "export.xlsx", {"Other": [["x"]]})
    with pytest.raises(UpstreamUnavailable, match="cannot read sheet 'Subscription'"):
        WorkbookSource(excel).fetch_rows("Subscription")


def test_missing_file(temp_workdir: Path):
    source = WorkbookSource(temp_workdir / "data" / "nope.xlsx")
    with pytest.raises(UpstreamUnavailable, match="workbook not found"):
        source.fetch_rows("Subscription")


def test_corrupt_xlsx(temp_workdir: Path):
    bad = temp_workdir / "data" / "bad.xlsx"
    bad.write_bytes(b"not a zip")
    with pytest.raises(UpstreamUnavailable):
        WorkbookSource(bad).fetch_rows("Subscription")


def test_read_csv_export(temp_workdir: Path):
    csv = temp_workdir / "data" / "export.csv"
    csv.write_text("Timestamp,Serial No,Company Name\n,SN7,Acme\n,NA,\n", encoding="utf-8")
    rows = WorkbookSource(csv).fetch_rows("ignored for csv")
    assert rows == [
        ["Timestamp", "Serial No", "Company Name"],
        ["", "SN7", "Acme"],
        ["", "NA", ""],
    ]


def test_empty_csv_export(temp_workdir: Path):
    csv = temp_workdir / "data" / "empty.csv"
    csv.write_text("", encoding="utf-8")
    assert WorkbookSource(csv).fetch_rows("Subscription") == []


def test_frame_to_rows_converts_missing_and_timestamps():
    df = pd.DataFrame([[pd.Timestamp("2024-03-05 10:15"), float("nan"), "x"]])
    assert frame_to_rows(df) == [["2024-03-05T10:15:00", None, "x"]]


def test_source_name(temp_workdir: Path):
    p = temp_workdir / "data" / "export.xlsx"
    assert WorkbookSource(p).source_name == str(p)
