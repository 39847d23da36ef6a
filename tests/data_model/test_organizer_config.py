# tests/data_model/test_organizer_config.py
from __future__ import annotations

import dataclasses

import pytest

from csv_categorizer.data_model import (
    DEFAULT_CATEGORY_NAME,
    CategoryBucket,
    CategoryRule,
    OrganizerConfig,
    SortType,
)
from csv_categorizer.exceptions import ConfigurationError


def test_defaults():
    config = OrganizerConfig()
    assert config.default_category_name == DEFAULT_CATEGORY_NAME == "Other"
    assert config.sort_type is SortType.ASC
    assert config.sort_column_name is None
    assert config.category_names() == ["Other"]


def test_aliases_are_frozen_into_tuples_and_keep_order():
    config = OrganizerConfig(column_name_to_aliases={"B": ["x", "y"], "A": None})
    assert config.column_name_to_aliases == {"B": ("x", "y"), "A": ()}
    assert config.column_names() == ["B", "A"]


def test_config_is_immutable():
    config = OrganizerConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.default_category_name = "x"  # type: ignore[misc]


def test_category_names_dedupes_and_puts_default_first():
    rules = (
        CategoryRule("B", "c1", ("x",)),
        CategoryRule("A", "c2", ("x",)),
        CategoryRule("B", "c2", ("y",)),
        CategoryRule("Default", "c1", ("z",)),
    )
    config = OrganizerConfig(category_rules=rules, default_category_name="Default")
    assert config.category_names() == ["Default", "B", "A"]


@pytest.mark.parametrize("name", ["", " ", None])
def test_blank_default_category_rejected(name):
    with pytest.raises(ConfigurationError):
        OrganizerConfig(default_category_name=name)


def test_sort_type_must_be_enum():
    with pytest.raises(ConfigurationError):
        OrganizerConfig(sort_type="DESC")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "raw,expected",
    [("ASC", SortType.ASC), ("desc", SortType.DESC), (" Desc ", SortType.DESC)],
)
def test_sort_type_from_str(raw, expected):
    assert SortType.from_str(raw) is expected


def test_sort_type_from_str_rejects_unknown():
    with pytest.raises(ValueError):
        SortType.from_str("up")


def test_bucket_copy_is_independent():
    bucket = CategoryBucket("X", [{"a": "1"}])
    clone = bucket.copy()
    clone.rows.append({"a": "2"})
    assert len(bucket.rows) == 1
    assert clone.category_name == "X"
    assert clone.rows == [{"a": "1"}, {"a": "2"}]
