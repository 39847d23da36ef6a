# csv_categorizer/utilities/config_logging.py
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
    },
}


def build_logging_config(level: str = "INFO", log_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Return a dictConfig mapping based on ``LOGGING``.

    ``level`` applies to the console handler. When ``log_file`` is given a
    rotating DEBUG-level file handler is added and its directory created.
    """
    cfg = copy.deepcopy(LOGGING)
    cfg["handlers"]["console"]["level"] = level.upper()
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        cfg["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": str(log_file),
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        }
        cfg["loggers"][""]["handlers"].append("file")
    return cfg
