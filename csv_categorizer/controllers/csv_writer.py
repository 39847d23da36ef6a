# csv_categorizer/controllers/csv_writer.py
from __future__ import annotations

import csv
import io
import os
from typing import Iterable, List, Sequence, TextIO, Union

from csv_categorizer.data_model import CategoryBucket

CATEGORY_COLUMN = "Bucket"


def write_organized_csv(
    buckets: Iterable[CategoryBucket],
    column_names: Sequence[str],
    out: Union[str, os.PathLike, TextIO],
    *,
    include_category: bool = False,
    encoding: str = "utf-8",
) -> None:
    """
    Write organized buckets as one CSV table to either:
      - a filesystem path (str/PathLike), or
      - a text stream with .write() (e.g., io.StringIO)

    Layout: a header of canonical column names, then each category's rows
    (missing cells written as ""), followed by one blank line per category.
    """
    if hasattr(out, "write") and callable(getattr(out, "write")):
        _write_organized_to_stream(buckets, column_names, out, include_category)  # type: ignore[arg-type]
        return

    with open(out, "w", encoding=encoding, newline="") as fp:
        _write_organized_to_stream(buckets, column_names, fp, include_category)


def render_organized_csv(
    buckets: Iterable[CategoryBucket],
    column_names: Sequence[str],
    *,
    include_category: bool = False,
) -> str:
    buf = io.StringIO()
    _write_organized_to_stream(buckets, column_names, buf, include_category)
    return buf.getvalue()


def _write_organized_to_stream(
    buckets: Iterable[CategoryBucket],
    column_names: Sequence[str],
    fp: TextIO,
    include_category: bool,
) -> None:
    w = csv.writer(fp, lineterminator="\n")
    header: List[str] = list(column_names)
    if include_category:
        header.insert(0, CATEGORY_COLUMN)
    w.writerow(header)
    for bucket in buckets:
        for row in bucket.rows:
            cells = [row.get(c, "") for c in column_names]
            if include_category:
                cells.insert(0, bucket.category_name)
            w.writerow(cells)
        fp.write("\n")
