from __future__ import annotations

import pytest

from subscription_sync.sheet.columns import ColumnMap
from subscription_sync.sheet.row_filter import is_usable_row, rejection_reason


def test_usable_row(make_row):
    row = make_row(serial_number="SN7", company_name="Acme", subscription_name="CloudSuite")
    assert is_usable_row(row) is True
    assert rejection_reason(row) is None


@pytest.mark.parametrize("row", [None, [], ["only one"], "SN7-Acme", 42, {"a": 1}])
def test_absent_short_or_non_row_values(row):
    assert is_usable_row(row) is False
    assert rejection_reason(row) == "short_row"


def test_tuple_rows_are_accepted(make_row):
    row = tuple(make_row(serial_number="3", company_name="Acme"))
    assert is_usable_row(row) is True


@pytest.mark.parametrize("serial", ["", "   ", None])
def test_empty_serial(make_row, serial):
    row = make_row(serial_number=serial, company_name="Acme", subscription_name="CloudSuite")
    assert rejection_reason(row) == "empty_serial"


@pytest.mark.parametrize("serial", ["Serial No", "SERIAL NO", " serial no "])
def test_header_label_any_case(make_row, serial):
    row = make_row(serial_number=serial, company_name="Company Name", subscription_name="Subscription Name")
    assert rejection_reason(row) == "header_row"


def test_header_label_must_match_exactly(make_row):
    row = make_row(serial_number="Serial No 5", company_name="Acme")
    assert is_usable_row(row) is True


@pytest.mark.parametrize("serial", ["Create Subscription", ">> CREATE SUBSCRIPTION form <<"])
def test_section_marker(make_row, serial):
    row = make_row(serial_number=serial, company_name="Acme")
    assert rejection_reason(row) == "section_marker"


def test_both_names_missing(make_row):
    row = make_row(serial_number="SN1", company_name="  ", subscription_name=None)
    assert rejection_reason(row) == "missing_names"


def test_one_name_is_enough(make_row):
    assert is_usable_row(make_row(serial_number="SN1", company_name="Acme"))
    assert is_usable_row(make_row(serial_number="SN1", subscription_name="CloudSuite"))


def test_two_cell_row_has_no_names():
    assert rejection_reason(["2024-03-05", "SN1"]) == "missing_names"


def test_custom_column_map():
    columns = ColumnMap.from_mapping({"serial_number": 0, "company_name": 1, "subscription_name": 2})
    assert is_usable_row(["7", "Acme", ""], columns)
    assert not is_usable_row(["Serial No", "Acme", ""], columns)
