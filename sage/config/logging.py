"""
Logging configuration for Sage.

Two output formats, chosen with ``SAGE_LOG_FORMAT``:
- ``console``: short, colored lines for local development
- ``json``: one JSON object per line for log shippers

Structured fields passed through ``extra=`` are appended to console lines
and merged into JSON entries.

Usage:
    from sage.config.logging import get_logger

    logger = get_logger(__name__)
    logger.info("intent_classified", extra={"intent": "sleep"})
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("SAGE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("SAGE_LOG_FORMAT", "console")  # "console" or "json"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
    | {"message", "asctime", "taskName"}
)

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "multipart")


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter; colors only when stdout is a TTY."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:<8}"
        if sys.stdout.isatty():
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        line = f"{self.formatTime(record, '%H:%M:%S')} {level} {record.getMessage()}"

        extras = _extra_fields(record)
        if extras:
            line += " [" + ", ".join(f"{k}={v}" for k, v in extras.items()) + "]"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JSONFormatter(logging.Formatter):
    """Machine-parseable formatter for production."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_extra_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


# ---------------------------------------------------------------------------
# Logger Factory
# ---------------------------------------------------------------------------

_configured = False


def configure_logging() -> None:
    """Install a single stdout handler on the root logger (idempotent)."""
    global _configured
    if _configured:
        return

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if LOG_FORMAT == "json" else ConsoleFormatter())
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring the root logger on first use."""
    configure_logging()
    return logging.getLogger(name)


# ---------------------------------------------------------------------------
# Script output helpers
# ---------------------------------------------------------------------------


def log_banner(
    logger: logging.Logger, title: str, char: str = "=", width: int = 60
) -> None:
    """Log a title framed by two rules."""
    logger.info(char * width)
    logger.info(title)
    logger.info(char * width)


def log_section(
    logger: logging.Logger, title: str, char: str = "-", width: int = 60
) -> None:
    """Log a blank line then a framed subsection title."""
    logger.info("")
    log_banner(logger, title, char=char, width=width)


def log_kv(logger: logging.Logger, key: str, value: Any, indent: int = 2) -> None:
    """Log an indented ``key: value`` line."""
    prefix = " " * indent
    if isinstance(value, float):
        logger.info("%s%s: %.2f", prefix, key, value)
    else:
        logger.info("%s%s: %s", prefix, key, value)


__all__ = [
    "get_logger",
    "configure_logging",
    "log_banner",
    "log_section",
    "log_kv",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
