# csv_categorizer/controllers/row_sources.py
from __future__ import annotations

import csv
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from csv_categorizer.exceptions import RowSourceError
from csv_categorizer.utilities import open_for_read

log = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}

RawRowDict = Dict[Optional[str], Optional[str]]


@dataclass
class FileRowSource:
    """Rows read from one input file, fully materialized."""

    path: Path
    raw_rows: List[RawRowDict] = field(default_factory=list)

    @property
    def name(self) -> str:
        return str(self.path)

    def rows(self) -> List[RawRowDict]:
        return self.raw_rows


def read_csv_rows(path: Path, encoding: str = "utf-8-sig") -> List[RawRowDict]:
    """
    Read a CSV file whose first record is the header.

    Cells beyond the header width are collected by ``csv.DictReader`` under
    the ``None`` key; short records yield ``None`` values. The default
    ``utf-8-sig`` encoding drops a leading byte-order mark so the first
    header matches its alias.
    """
    try:
        with open_for_read(path, binary=False, encoding=encoding, newline="") as f:
            reader = csv.DictReader(f)
            rows = [dict(r) for r in reader]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise RowSourceError(f"failed to load csv file {path}: {e}", {"path": str(path)}) from e
    log.debug("read %d rows from %s with header=%s", len(rows), path, reader.fieldnames)
    return rows


def read_excel_rows(path: Path, sheet_name: Union[int, str] = 0) -> List[RawRowDict]:
    """
    Read one worksheet as text rows.

    Every cell is read as a string; blank cells become ``""``.
    Requires pandas (and an Excel engine such as openpyxl).
    """
    try:
        df = pd.read_excel(path, sheet_name=sheet_name, dtype=str, keep_default_na=False)
    except (OSError, ValueError, ImportError, zipfile.BadZipFile) as e:
        raise RowSourceError(f"failed to load excel file {path}: {e}", {"path": str(path)}) from e
    df = df.fillna("")
    rows: List[RawRowDict] = [
        {str(k): ("" if v is None else str(v)) for k, v in record.items()}
        for record in df.to_dict(orient="records")
    ]
    log.debug("read %d rows from %s with header=%s", len(rows), path, list(df.columns))
    return rows


def load_row_source(path: Union[str, Path], encoding: str = "utf-8-sig") -> FileRowSource:
    """Load ``path`` as CSV, or as Excel when the suffix says so."""
    path = Path(path)
    if not path.is_file():
        raise RowSourceError(f"input file not found: {path}", {"path": str(path)})
    if path.suffix.lower() in EXCEL_SUFFIXES:
        rows = read_excel_rows(path)
    else:
        rows = read_csv_rows(path, encoding=encoding)
    return FileRowSource(path=path, raw_rows=rows)
