#!/usr/bin/env python3
"""
CSV categorize-and-merge CLI

Features:
- Reads a YAML organizer configuration
- Reads one or more CSV (or Excel) inputs
- Categorizes every row, merges all inputs by category and sorts each category
- Writes one combined CSV to a file or stdout
"""
from __future__ import annotations

import argparse
import logging
import logging.config
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from csv_categorizer.controllers import (
    CategoryOrganizer,
    load_config,
    load_row_source,
    write_organized_csv,
)
from csv_categorizer.controllers.category_organizer import bucket_counts
from csv_categorizer.exceptions import ConfigurationError, RowSourceError
from csv_categorizer.utilities import build_logging_config

log = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="csv-categorize",
        description="Categorize rows from one or more CSV files and merge them into one table.",
    )
    ap.add_argument("config", type=Path, help="Path to the YAML organizer config")
    ap.add_argument("inputs", type=Path, nargs="+", help="One or more input .csv/.xlsx files")
    ap.add_argument("-o", "--output", type=Path,
                    help="Path to the output .csv (default: write to stdout)")
    ap.add_argument("--encoding", default="utf-8-sig",
                    help="Text encoding of input CSVs (default: utf-8-sig, which also reads plain utf-8). Try cp1252 for old exports.")
    ap.add_argument("--include-category", action="store_true",
                    help="Prepend a Category column to every output row")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Console log level (default: INFO)")
    ap.add_argument("--log-file", type=Path, help="Also write DEBUG logs to this rotating file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.config.dictConfig(build_logging_config(args.log_level, args.log_file))
    log.debug("called with args: %s", args)

    if not args.config.is_file():
        raise SystemExit(f"Config file not found: {args.config}")
    for p in args.inputs:
        if not p.is_file():
            raise SystemExit(f"Input file not found: {p}")

    try:
        config = load_config(args.config)
        organizer = CategoryOrganizer(config)
        sources = [load_row_source(p, encoding=args.encoding) for p in args.inputs]
        buckets = organizer.organize(sources)
    except (ConfigurationError, RowSourceError) as e:
        log.error("%s", e)
        return EXIT_INPUT_ERROR

    log.info("organized rows per category: %s", dict(bucket_counts(buckets)))

    columns: List[str] = config.column_names()
    if args.output is None:
        write_organized_csv(buckets, columns, sys.stdout, include_category=args.include_category)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        write_organized_csv(buckets, columns, args.output, include_category=args.include_category)
        log.info("wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
