# tests/controllers/test_date_transformer.py
from __future__ import annotations

import logging

import pytest

from csv_categorizer.controllers.date_transformer import apply_date_transformers, transform_date
from csv_categorizer.data_model import DateTransformerConfig

US_TO_ISO = DateTransformerConfig(("%m/%d/%Y", "%m/%d'%y", "%Y-%m-%d"), "%Y-%m-%d")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("12/31/2024", "2024-12-31"),
        ("12/31'24", "2024-12-31"),
        ("12/31’24", "2024-12-31"),  # curly apostrophe
        ("2024-12-31", "2024-12-31"),
        ("", ""),
        ("not a date", None),
    ],
)
def test_transform_date(raw, expected):
    assert transform_date(raw, US_TO_ISO) == expected


def test_apply_date_transformers_rewrites_only_configured_present_columns(caplog):
    row = {"Date": "01/02/2023", "Posted": "01/03/2023", "Other": "bad"}
    transformers = {"Date": US_TO_ISO, "Missing": US_TO_ISO, "Other": US_TO_ISO}

    with caplog.at_level(logging.WARNING, logger="csv_categorizer"):
        out = apply_date_transformers(row, transformers)

    assert out is row
    assert row == {"Date": "2023-01-02", "Posted": "01/03/2023", "Other": "bad"}
    assert "Other" in caplog.text
    assert "Missing" not in row
