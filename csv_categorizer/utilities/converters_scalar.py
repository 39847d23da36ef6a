# csv_categorizer/utilities/converters_scalar.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional


def to_datetime_with_formats(value: str, formats: Iterable[str], /) -> Optional[datetime]:
    """
    Parse ``value`` with the first ``strptime`` format that accepts it.

    Curly/back-tick apostrophes are folded to ``'`` first so QIF-style
    ``12/31'24`` exports parse with ``%m/%d'%y``.

    Returns:
        datetime if some format matched; otherwise None.
    """
    txt = (value or "").strip().replace("’", "'").replace("`", "'")
    if not txt:
        return None
    for fmt in formats:
        try:
            return datetime.strptime(txt, fmt)
        except ValueError:
            continue
    return None
