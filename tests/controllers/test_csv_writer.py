# tests/controllers/test_csv_writer.py
from __future__ import annotations

import io

from csv_categorizer.controllers.csv_writer import render_organized_csv, write_organized_csv
from csv_categorizer.data_model import CategoryBucket

COLUMNS = ["Date", "Description", "Amount"]
BUCKETS = [
    CategoryBucket("Other", [{"Date": "2023-01-02", "Description": "Movie", "Amount": "18.00"}]),
    CategoryBucket(
        "Groceries",
        [
            {"Date": "2023-01-10", "Description": "Shoprite, Hoboken", "Amount": "31.45"},
            {"Description": "No date"},
        ],
    ),
    CategoryBucket("Empty", []),
]


def test_render_writes_header_rows_and_blank_line_per_category():
    out = render_organized_csv(BUCKETS, COLUMNS)

    assert out == (
        "Date,Description,Amount\n"
        "2023-01-02,Movie,18.00\n"
        "\n"
        '2023-01-10,"Shoprite, Hoboken",31.45\n'
        ",No date,\n"
        "\n"
        "\n"
    )


def test_include_category_prepends_column():
    out = render_organized_csv(BUCKETS[:1], COLUMNS, include_category=True)
    assert out.splitlines()[:2] == ["Bucket,Date,Description,Amount", "Other,2023-01-02,Movie,18.00"]


def test_write_to_stream_and_path_match(tmp_path):
    buf = io.StringIO()
    write_organized_csv(BUCKETS, COLUMNS, buf)

    p = tmp_path / "out.csv"
    write_organized_csv(BUCKETS, COLUMNS, p)

    assert p.read_text(encoding="utf-8") == buf.getvalue() == render_organized_csv(BUCKETS, COLUMNS)
