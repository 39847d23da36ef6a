# csv_categorizer/data_model/category_bucket.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from typing_extensions import TypeAlias

# canonical column name -> cell value, in source column order
Row: TypeAlias = Dict[str, str]


@dataclass
class CategoryBucket:
    """Ordered rows that were assigned to one category."""

    category_name: str
    rows: List[Row] = field(default_factory=list)

    def copy(self) -> "CategoryBucket":
        return CategoryBucket(self.category_name, list(self.rows))
