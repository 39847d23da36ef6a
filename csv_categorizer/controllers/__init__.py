# csv_categorizer/controllers/__init__.py
from .category_aggregator import CategoryAccumulator, assign, merge
from .category_matcher import CategoryMatcher, build_rule_index, resolve_category
from .category_organizer import CategoryOrganizer, organize, sort_rows
from .column_normalizer import normalize_column_name, normalize_row
from .config_loader import config_from_dict, load_config, load_config_from_stream
from .csv_writer import render_organized_csv, write_organized_csv
from .date_transformer import apply_date_transformers, transform_date
from .row_sources import FileRowSource, load_row_source, read_csv_rows, read_excel_rows

__all__ = [
    "CategoryAccumulator", "assign", "merge",
    "CategoryMatcher", "build_rule_index", "resolve_category",
    "CategoryOrganizer", "organize", "sort_rows",
    "normalize_column_name", "normalize_row",
    "config_from_dict", "load_config", "load_config_from_stream",
    "render_organized_csv", "write_organized_csv",
    "apply_date_transformers", "transform_date",
    "FileRowSource", "load_row_source", "read_csv_rows", "read_excel_rows",
]
