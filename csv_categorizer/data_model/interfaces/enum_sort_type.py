# csv_categorizer/data_model/interfaces/enum_sort_type.py
from __future__ import annotations

from enum import Enum


class SortType(Enum):
    """Direction in which rows are ordered inside a category."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_str(cls, value: str) -> "SortType":
        """Parse ``ASC``/``DESC`` case-insensitively."""
        key = (value or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown sort type: {value!r}") from None
