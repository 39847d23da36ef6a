"""
YAML configuration → :class:`OrganizerConfig`.

Recognized keys::

    sortColumnName: Date
    sortType: DESC                      # ASC (default) or DESC
    defaultCategoryName: Discretionary  # required
    columnNameToAliases:
      - Date
      - Description: [Transaction, Desc]
    columnNameToCategoryConfig:
      - Description:
          - category: Groceries
            regexes: ["Shoprite.*", "99 ranch market.*"]
    columnNameToTransformer:
      - Date:
          dateTransformer:
            inputFormats: ["%m/%d/%Y", "%Y-%m-%d"]
            outputFormat: "%Y-%m-%d"

Every malformed entry raises ``ConfigurationError``; nothing is skipped.
"""

# csv_categorizer/controllers/config_loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Dict, List, Mapping, Tuple, Union

import yaml

from csv_categorizer.data_model import (
    CategoryRule,
    DateTransformerConfig,
    OrganizerConfig,
    SortType,
)
from csv_categorizer.exceptions import ConfigurationError
from csv_categorizer.utilities import is_null_or_whitespace, open_for_read

from .category_matcher import compile_rule

log = logging.getLogger(__name__)

SORT_COLUMN_KEY = "sortColumnName"
SORT_TYPE_KEY = "sortType"
DEFAULT_CATEGORY_KEY = "defaultCategoryName"
ALIASES_KEY = "columnNameToAliases"
CATEGORY_CONFIG_KEY = "columnNameToCategoryConfig"
TRANSFORMER_KEY = "columnNameToTransformer"


def load_config(path: Union[str, Path], encoding: str = "utf-8") -> OrganizerConfig:
    """Read and validate a YAML configuration file."""
    path = Path(path)
    try:
        with open_for_read(path, binary=False, encoding=encoding) as f:
            return load_config_from_stream(f)
    except OSError as e:
        raise ConfigurationError(
            f"failed to load config file {path}: {e}", {"path": str(path)}
        ) from e


def load_config_from_stream(stream: Union[str, IO[str]]) -> OrganizerConfig:
    """Parse YAML text (or a text stream) into an :class:`OrganizerConfig`."""
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"failed to load yaml config: {e}") from e
    return config_from_dict(data)


def config_from_dict(data: Any) -> OrganizerConfig:
    """Validate an already-parsed configuration document."""
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"configuration document must be a mapping, got {type(data).__name__}"
        )

    default_category = data.get(DEFAULT_CATEGORY_KEY)
    if not isinstance(default_category, str) or is_null_or_whitespace(default_category):
        raise ConfigurationError(
            f"{DEFAULT_CATEGORY_KEY} is required and must be a non-empty string",
            {"field": DEFAULT_CATEGORY_KEY},
        )

    sort_column = data.get(SORT_COLUMN_KEY)
    if sort_column is not None and not isinstance(sort_column, str):
        raise ConfigurationError(
            f"{SORT_COLUMN_KEY} must be a string, got {sort_column!r}",
            {"field": SORT_COLUMN_KEY},
        )

    sort_type = SortType.ASC
    raw_sort_type = data.get(SORT_TYPE_KEY)
    if raw_sort_type is not None:
        try:
            sort_type = SortType.from_str(str(raw_sort_type))
        except ValueError as e:
            raise ConfigurationError(
                f"{SORT_TYPE_KEY} must be ASC or DESC, got {raw_sort_type!r}",
                {"field": SORT_TYPE_KEY},
            ) from e

    config = OrganizerConfig(
        column_name_to_aliases=_parse_aliases(data.get(ALIASES_KEY)),
        category_rules=tuple(_parse_category_rules(data.get(CATEGORY_CONFIG_KEY))),
        default_category_name=default_category,
        sort_column_name=sort_column,
        sort_type=sort_type,
        column_name_to_date_transformer=_parse_transformers(data.get(TRANSFORMER_KEY)),
    )
    log.debug("loaded config: %s", config)
    return config


# region Section parsers


def _as_list(value: Any, key: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationError(
            f"{key} must be a list, got {type(value).__name__}", {"field": key}
        )
    return value


def _single_entry(entry: Any, key: str) -> Tuple[str, Any]:
    if not isinstance(entry, Mapping) or len(entry) != 1:
        raise ConfigurationError(
            f"each {key} entry must be a single-key mapping, got {entry!r}",
            {"field": key, "entry": entry},
        )
    (name, value), = entry.items()
    if not isinstance(name, str) or is_null_or_whitespace(name):
        raise ConfigurationError(
            f"{key} column names must be non-empty strings, got {name!r}",
            {"field": key, "entry": entry},
        )
    return name, value


def _string_list(value: Any, key: str, owner: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(
            f"{key} for {owner!r} must be a list of strings, got {value!r}",
            {"field": key, "owner": owner},
        )
    return tuple(value)


def _parse_aliases(value: Any) -> Dict[str, Tuple[str, ...]]:
    aliases: Dict[str, Tuple[str, ...]] = {}
    for entry in _as_list(value, ALIASES_KEY):
        if isinstance(entry, str):
            name, names = entry, ()
        else:
            name, raw = _single_entry(entry, ALIASES_KEY)
            names = _string_list(raw, ALIASES_KEY, name)
        if name in aliases:
            raise ConfigurationError(
                f"column {name!r} is declared twice in {ALIASES_KEY}",
                {"field": ALIASES_KEY, "column": name},
            )
        aliases[name] = names
    return aliases


def _parse_category_rules(value: Any) -> List[CategoryRule]:
    rules: List[CategoryRule] = []
    for entry in _as_list(value, CATEGORY_CONFIG_KEY):
        column_name, rule_entries = _single_entry(entry, CATEGORY_CONFIG_KEY)
        for rule_entry in _as_list(rule_entries, f"{CATEGORY_CONFIG_KEY}.{column_name}"):
            if not isinstance(rule_entry, Mapping):
                raise ConfigurationError(
                    f"category config for column {column_name!r} must be a mapping, got {rule_entry!r}",
                    {"field": CATEGORY_CONFIG_KEY, "column": column_name},
                )
            category = rule_entry.get("category")
            regexes = rule_entry.get("regexes")
            if not isinstance(category, str) or is_null_or_whitespace(category) or regexes is None:
                raise ConfigurationError(
                    f"incomplete category config for column {column_name!r}: "
                    f"category={category!r}, regexes={regexes!r}",
                    {"field": CATEGORY_CONFIG_KEY, "column": column_name},
                )
            rule = CategoryRule(
                category=category,
                column_name=column_name,
                regexes=_string_list(regexes, "regexes", category),
            )
            compile_rule(rule)  # surface bad patterns while the document is at hand
            rules.append(rule)
    return rules


def _parse_transformers(value: Any) -> Dict[str, DateTransformerConfig]:
    transformers: Dict[str, DateTransformerConfig] = {}
    for entry in _as_list(value, TRANSFORMER_KEY):
        column_name, body = _single_entry(entry, TRANSFORMER_KEY)
        date_cfg = body.get("dateTransformer") if isinstance(body, Mapping) else None
        if not isinstance(date_cfg, Mapping):
            raise ConfigurationError(
                f"transformer for column {column_name!r} needs a dateTransformer mapping",
                {"field": TRANSFORMER_KEY, "column": column_name},
            )
        input_formats = _string_list(date_cfg.get("inputFormats"), "inputFormats", column_name)
        output_format = date_cfg.get("outputFormat")
        if not input_formats or not isinstance(output_format, str) or not output_format:
            raise ConfigurationError(
                f"dateTransformer for column {column_name!r} needs inputFormats and outputFormat",
                {"field": TRANSFORMER_KEY, "column": column_name},
            )
        transformers[column_name] = DateTransformerConfig(input_formats, output_format)
    return transformers


# endregion Section parsers
