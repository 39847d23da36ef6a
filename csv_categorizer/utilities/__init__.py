from .config_logging import LOGGING, build_logging_config
from .converters_scalar import to_datetime_with_formats
from .core_util import is_null_or_whitespace, open_for_read, safe_cell

__all__ = [
    "is_null_or_whitespace",
    "safe_cell",
    "open_for_read",
    "to_datetime_with_formats",
    "LOGGING",
    "build_logging_config",
]
