"""Custom exception classes for the categorize-and-merge pipeline.

Configuration problems are fatal and surface before any row is processed.
Row source problems are fatal for the file concerned. Row-level issues are
never raised; they are logged by the organizer instead.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CsvCategorizerError(Exception):
    """Base exception for all csv_categorizer errors.

    Attributes:
        details: Additional context about the error (for logging)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(CsvCategorizerError, ValueError):
    """Raised when the organizer configuration is unusable.

    Common causes:
    - Missing or empty default category name
    - A category regex that does not compile
    - A configuration document with an unexpected shape
    """

    pass


class RowSourceError(CsvCategorizerError, OSError):
    """Raised when an input file cannot be read into rows."""

    pass
