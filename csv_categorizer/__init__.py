# csv_categorizer/__init__.py
"""
Categorize rows from several tabular inputs with regex rules and merge them
into one table ordered by category.
"""

from .controllers import (
    CategoryOrganizer,
    config_from_dict,
    load_config,
    load_row_source,
    organize,
    write_organized_csv,
)
from .data_model import (
    CategoryBucket,
    CategoryRule,
    DateTransformerConfig,
    OrganizerConfig,
    SortType,
)
from .exceptions import ConfigurationError, CsvCategorizerError, RowSourceError

__all__ = [
    "CategoryOrganizer", "config_from_dict", "load_config", "load_row_source",
    "organize", "write_organized_csv", "CategoryBucket", "CategoryRule",
    "DateTransformerConfig", "OrganizerConfig", "SortType",
    "ConfigurationError", "CsvCategorizerError", "RowSourceError",
]
