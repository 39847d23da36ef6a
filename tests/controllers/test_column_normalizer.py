# tests/controllers/test_column_normalizer.py
from __future__ import annotations

import logging

import pytest

from csv_categorizer.controllers.column_normalizer import (
    find_alias_conflicts,
    normalize_column_name,
    normalize_row,
)

ALIASES = {
    "Date": ("Transaction Date", "Posted Date"),
    "Description": ("Transaction",),
    "Category": (),
    "Amount": (),
}


# ---------- normalize_column_name ----------
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Date", "Date"),
        ("date", "Date"),
        ("  DATE  ", "Date"),
        ("posted date", "Date"),
        ("Transaction", "Description"),
        ("TRANSACTION ", "Description"),
        ("Amount", "Amount"),
    ],
)
def test_normalize_column_name_matches_canonical_and_aliases(raw, expected):
    assert normalize_column_name(raw, ALIASES) == expected


@pytest.mark.parametrize("raw", ["Notes", "", "Desc", None])
def test_normalize_column_name_returns_none_when_unknown(raw):
    assert normalize_column_name(raw, ALIASES) is None


def test_normalize_column_name_first_declared_entry_wins():
    """A label that is one column's name and another column's alias resolves
    to whichever entry was declared first."""
    first_alias = {"Memo": ("Description",), "Description": ()}
    first_name = {"Description": (), "Memo": ("Description",)}

    assert normalize_column_name("description", first_alias) == "Memo"
    assert normalize_column_name("description", first_name) == "Description"


# ---------- normalize_row ----------
def test_normalize_row_drops_unknown_columns_and_keeps_order():
    raw = {"Notes": "x", "Transaction": " Shoprite ", "Date": "2023-01-01", "Amount": None}

    row, dropped = normalize_row(raw, ALIASES)

    assert list(row) == ["Description", "Date", "Amount"]
    assert row == {"Description": "Shoprite", "Date": "2023-01-01", "Amount": ""}
    assert dropped == ["Notes"]


def test_normalize_row_reports_none_label_from_overlong_record():
    raw = {"Date": "2023-01-01", None: ["extra"]}

    row, dropped = normalize_row(raw, ALIASES)

    assert row == {"Date": "2023-01-01"}
    assert dropped == [None]


def test_normalize_row_warns_when_two_columns_share_a_canonical_name(caplog):
    raw = {"Transaction Date": "2023-01-01", "Posted Date": ""}

    with caplog.at_level(logging.WARNING, logger="csv_categorizer"):
        row, dropped = normalize_row(raw, ALIASES)

    assert row == {"Date": ""}
    assert dropped == []
    assert "'Posted Date' maps to 'Date'" in caplog.text


# ---------- find_alias_conflicts ----------
def test_find_alias_conflicts_lists_owners_in_table_order():
    table = {"Description": ("Memo",), "Memo": (), "Date": ()}
    assert find_alias_conflicts(table) == {"memo": ["Description", "Memo"]}


def test_find_alias_conflicts_empty_when_unique():
    assert find_alias_conflicts(ALIASES) == {}
