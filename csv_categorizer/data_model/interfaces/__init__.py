# csv_categorizer/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the categorizer data model.
"""

from .enum_sort_type import SortType
from .i_row_source import IRowSource, RawRow

__all__ = [
    "SortType",
    "IRowSource",
    "RawRow",
]
