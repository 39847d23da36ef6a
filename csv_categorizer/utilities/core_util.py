#!/usr/bin/env python3
"""
Core Utilities

Features:
- Cell text helpers shared by the normalizer, matcher and organizer
- File I/O helpers
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Literal, Optional, overload

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def safe_cell(value: Any) -> str:
    """Cell value as stripped text; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return str(value).strip()


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


# endregion Common functions
