# csv_categorizer/controllers/column_normalizer.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from csv_categorizer.data_model import RawRow, Row
from csv_categorizer.utilities import safe_cell

log = logging.getLogger(__name__)


def normalize_column_name(
    raw_label: Optional[str], alias_table: Mapping[str, Iterable[str]]
) -> Optional[str]:
    """
    Resolve a raw column label to its canonical column name.

    The label is stripped, then compared case-insensitively against each
    canonical name and its aliases in table order; the first entry that
    matches wins. Returns None when nothing matches.
    """
    if raw_label is None:
        return None
    label = raw_label.strip().casefold()
    for canonical, aliases in alias_table.items():
        if label == canonical.casefold():
            return canonical
        for alias in aliases:
            if label == alias.casefold():
                return canonical
    return None


def normalize_row(
    raw_row: RawRow, alias_table: Mapping[str, Iterable[str]]
) -> Tuple[Row, List[Optional[str]]]:
    """
    Build a canonical row from ``raw_row``, keeping the raw column order.

    Cell values are stripped and ``None`` becomes ``""``. Returns the row and
    the raw labels that were dropped because no canonical name matched. When
    two raw columns map to the same canonical name the later one wins and a
    warning is logged.
    """
    row: Row = {}
    dropped: List[Optional[str]] = []
    for raw_label, value in raw_row.items():
        canonical = normalize_column_name(raw_label, alias_table)
        if canonical is None:
            dropped.append(raw_label)
            continue
        if canonical in row:
            log.warning(
                "column %r maps to %r, which another column already set; keeping the later value",
                raw_label,
                canonical,
            )
        row[canonical] = safe_cell(value)
    return row, dropped


def find_alias_conflicts(alias_table: Mapping[str, Iterable[str]]) -> Dict[str, List[str]]:
    """
    Labels claimed by more than one canonical column.

    Maps each contested label (casefolded) to the canonical names claiming it,
    in table order. Only the first one is ever returned by
    :func:`normalize_column_name`.
    """
    claims: Dict[str, List[str]] = {}
    for canonical, aliases in alias_table.items():
        labels = {canonical.casefold(), *(a.casefold() for a in aliases)}
        for label in labels:
            owners = claims.setdefault(label, [])
            if canonical not in owners:
                owners.append(canonical)
    return {label: owners for label, owners in claims.items() if len(owners) > 1}
