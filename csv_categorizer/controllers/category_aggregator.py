# csv_categorizer/controllers/category_aggregator.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from csv_categorizer.data_model import CategoryBucket, Row

BucketMap = Dict[str, CategoryBucket]


def assign(row: Row, category: str, buckets: BucketMap) -> CategoryBucket:
    """Append ``row`` to the bucket for ``category``, creating the bucket if needed."""
    bucket = buckets.get(category)
    if bucket is None:
        bucket = CategoryBucket(category)
        buckets[category] = bucket
    bucket.rows.append(row)
    return bucket


def merge(buckets_a: Mapping[str, CategoryBucket], buckets_b: Mapping[str, CategoryBucket]) -> BucketMap:
    """
    Combine two bucket maps without mutating either.

    For a category on both sides the rows of ``buckets_a`` come first,
    followed by the rows of ``buckets_b``. Keys keep ``buckets_a``'s order,
    then the new keys of ``buckets_b``.
    """
    merged: BucketMap = {name: bucket.copy() for name, bucket in buckets_a.items()}
    for name, bucket in buckets_b.items():
        existing = merged.get(name)
        if existing is None:
            merged[name] = bucket.copy()
        else:
            existing.rows.extend(bucket.rows)
    return merged


@dataclass
class CategoryAccumulator:
    """
    Category buckets collected during a single organize call.

    Passed explicitly between the organizer's steps; nothing is shared
    between calls.
    """

    buckets: BucketMap = field(default_factory=dict)

    def assign(self, row: Row, category: str) -> CategoryBucket:
        return assign(row, category, self.buckets)

    def merge_from(self, other: Mapping[str, CategoryBucket]) -> None:
        self.buckets = merge(self.buckets, other)

    def get(self, category: str) -> Optional[CategoryBucket]:
        return self.buckets.get(category)

    def row_count(self) -> int:
        return sum(len(b.rows) for b in self.buckets.values())
