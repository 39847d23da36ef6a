"""
Categorize-and-merge orchestration.

This module ties the pieces together:

• Normalize each raw row's column labels to canonical names (dropping unknown
  columns).
• Rewrite configured date columns.
• Resolve a category with :class:`CategoryMatcher`, falling back to the
  configured default category.
• Collect rows per input source, then merge the sources in input order.
• Emit the default category first, then the configured categories in rule
  declaration order, each sorted by the configured sort column.
"""

# csv_categorizer/controllers/category_organizer.py
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from csv_categorizer.data_model import (
    CategoryBucket,
    IRowSource,
    OrganizerConfig,
    RawRow,
    Row,
    SortType,
)

from .category_aggregator import BucketMap, CategoryAccumulator
from .category_matcher import CategoryMatcher
from .column_normalizer import find_alias_conflicts, normalize_row
from .date_transformer import apply_date_transformers

log = logging.getLogger(__name__)

RowSet = Union[IRowSource, Iterable[RawRow]]


def sort_rows(rows: List[Row], sort_column_name: Optional[str], sort_type: SortType) -> List[Row]:
    """
    Order ``rows`` by the text of ``sort_column_name`` (code point order).

    A missing cell sorts as ``""``. ``sorted`` is stable and ``reverse=True``
    keeps equal keys in their input order, the same result as a stable sort
    with swapped comparison operands.
    """
    if not sort_column_name:
        return list(rows)
    return sorted(
        rows,
        key=lambda row: row.get(sort_column_name) or "",
        reverse=sort_type is SortType.DESC,
    )


class CategoryOrganizer:
    """
    Organizes rows from any number of inputs into sorted category buckets.

    The configuration is validated when the organizer is built: every regex
    is compiled up front, so a bad pattern raises ``ConfigurationError``
    before any row is processed. The organizer keeps no state between
    :meth:`organize` calls.
    """

    def __init__(self, config: OrganizerConfig):
        self.config = config
        self.matcher = CategoryMatcher(config.category_rules)
        self._warn_about_config()

    def _warn_about_config(self) -> None:
        for label, owners in find_alias_conflicts(self.config.column_name_to_aliases).items():
            log.warning(
                "column label %r is claimed by %s; %r wins",
                label,
                owners,
                owners[0],
            )
        known = set(self.config.column_name_to_aliases)
        for column_name in self.matcher.columns():
            if column_name not in known:
                log.warning(
                    "category rules on column %r can never fire: column is not in columnNameToAliases",
                    column_name,
                )

    # --- per row / per source ------------------------------------------------

    def categorize_row(self, raw_row: RawRow) -> tuple[str, Row]:
        """Normalize ``raw_row`` and return ``(category, row)``."""
        log.debug("processing row: %s", raw_row)
        row, dropped = normalize_row(raw_row, self.config.column_name_to_aliases)
        for label in dropped:
            log.warning("skipping column unspecified by input config: %r", label)
        if self.config.column_name_to_date_transformer:
            apply_date_transformers(row, self.config.column_name_to_date_transformer)

        category = self.matcher.resolve_category(row)
        if category is None:
            category = self.config.default_category_name
            log.debug("no category resolved, so using default=%s", category)
        return category, row

    def categorize_source(self, raw_rows: Iterable[RawRow]) -> BucketMap:
        """Bucket the rows of one input source, in source order."""
        source = CategoryAccumulator()
        for raw_row in raw_rows:
            category, row = self.categorize_row(raw_row)
            source.assign(row, category)
        return source.buckets

    # --- whole batch ---------------------------------------------------------

    def organize(self, input_row_sets: Sequence[RowSet]) -> List[CategoryBucket]:
        """
        Categorize, merge and sort every input.

        Returns one bucket per category: the default category first, then each
        configured category in rule-declaration order. Configured categories
        with no rows are returned with an empty row list.
        """
        log.info(
            "organizing rows from %d sources with config: %s",
            len(input_row_sets),
            self.config,
        )
        accumulator = CategoryAccumulator()
        for index, row_set in enumerate(input_row_sets):
            name, raw_rows = _unpack_row_set(row_set, index)
            buckets = self.categorize_source(raw_rows)
            if not buckets:
                log.warning("source %s produced no rows, check the configuration you provided", name)
                continue
            log.debug(
                "source %s: %s",
                name,
                {category: len(bucket.rows) for category, bucket in buckets.items()},
            )
            accumulator.merge_from(buckets)

        log.info(
            "organized %d rows into %d categories",
            accumulator.row_count(),
            len(self.config.category_names()),
        )
        return self._ordered_output(accumulator)

    def _ordered_output(self, accumulator: CategoryAccumulator) -> List[CategoryBucket]:
        organized: List[CategoryBucket] = []
        for category in self.config.category_names():
            bucket = accumulator.get(category)
            rows = bucket.rows if bucket is not None else []
            organized.append(
                CategoryBucket(
                    category,
                    sort_rows(rows, self.config.sort_column_name, self.config.sort_type),
                )
            )
        return organized


def _unpack_row_set(row_set: RowSet, index: int) -> tuple[str, Iterable[RawRow]]:
    if isinstance(row_set, IRowSource):
        return row_set.name, row_set.rows()
    return f"#{index + 1}", row_set


def organize(input_row_sets: Sequence[RowSet], config: OrganizerConfig) -> List[CategoryBucket]:
    """Convenience wrapper: ``CategoryOrganizer(config).organize(input_row_sets)``."""
    return CategoryOrganizer(config).organize(input_row_sets)


def bucket_counts(buckets: Iterable[CategoryBucket]) -> Mapping[str, int]:
    """``{category: row count}`` for logging and quick assertions."""
    return {b.category_name: len(b.rows) for b in buckets}
