# csv_categorizer/data_model/__init__.py
from .category_bucket import CategoryBucket, Row
from .interfaces import IRowSource, RawRow, SortType
from .organizer_config import (
    DEFAULT_CATEGORY_NAME,
    CategoryRule,
    ColumnAliasTable,
    DateTransformerConfig,
    OrganizerConfig,
)

__all__ = [
    "CategoryBucket", "Row", "IRowSource", "RawRow", "SortType",
    "DEFAULT_CATEGORY_NAME", "CategoryRule", "ColumnAliasTable",
    "DateTransformerConfig", "OrganizerConfig"]
