"""
Logging setup for the back-office API.

``setup_logging`` attaches one console handler (and optionally a file
handler) to the root logger the first time it runs.  Later calls only
adjust the level of the ``dating_admin_api`` loggers, so building
several apps in one process, as the tests do, never duplicates output.
Set ``LOG_JSON=true`` to emit one JSON object per line for log
shippers.
"""

import json
import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "dating_admin_api"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _formatter(use_json: bool) -> logging.Formatter:
    if use_json:
        return JsonFormatter(datefmt=DATE_FORMAT)
    return logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt=DATE_FORMAT,
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, use_json: bool = False) -> None:
    """Configure application logging.

    Parameters
    ----------
    level : str
        Level name for the application loggers, case insensitive.
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Also write to this file when given.
    use_json : bool
        Emit JSON lines instead of plain text.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(numeric_level)
    formatter = _formatter(use_json)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
