# csv_categorizer/data_model/interfaces/i_row_source.py
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from typing_extensions import Protocol, TypeAlias, runtime_checkable

RawRow: TypeAlias = Mapping[Optional[str], Optional[str]]


@runtime_checkable
class IRowSource(Protocol):
    """One input table: a display name and its raw rows in source order."""

    @property
    def name(self) -> str: ...

    def rows(self) -> Iterable[RawRow]: ...
