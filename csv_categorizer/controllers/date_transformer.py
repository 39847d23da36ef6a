# csv_categorizer/controllers/date_transformer.py
from __future__ import annotations

import logging
from typing import Mapping, Optional

from csv_categorizer.data_model import DateTransformerConfig, Row
from csv_categorizer.utilities import to_datetime_with_formats

log = logging.getLogger(__name__)


def transform_date(value: str, config: DateTransformerConfig) -> Optional[str]:
    """
    Reformat ``value`` using the first input format that parses it.

    Returns None if no input format matches; empty values stay empty.
    """
    if value == "":
        return ""
    parsed = to_datetime_with_formats(value, config.input_formats)
    if parsed is None:
        return None
    return parsed.strftime(config.output_format)


def apply_date_transformers(row: Row, transformers: Mapping[str, DateTransformerConfig]) -> Row:
    """
    Rewrite the configured date columns of ``row`` in place and return it.

    Values no input format accepts are left untouched and logged.
    """
    for column_name, config in transformers.items():
        if column_name not in row:
            continue
        value = row[column_name]
        transformed = transform_date(value, config)
        if transformed is None:
            log.warning(
                "leaving %s=%r unchanged: no input format in %s matched",
                column_name,
                value,
                list(config.input_formats),
            )
            continue
        row[column_name] = transformed
    return row
