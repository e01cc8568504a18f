"""Structured JSON logging for sentry-selfhosted-mcp.

Always writes JSONL to stderr (stdout carries the MCP stdio transport).
Optionally mirrors to a rotating log file (5MB, 3 backups).
"""

from __future__ import annotations

import json
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOGGER_NAME = "sentry_selfhosted_mcp"
_STDERR_HANDLER_NAME = "sentry_selfhosted_mcp.stderr"
_setup_lock = threading.Lock()
_MAX_BYTES = 5 * 1024 * 1024  # 5MB
_BACKUP_COUNT = 3

# LogRecord attribute -> JSON key
_EXTRA_FIELDS = (
    ("tool", "tool"),
    ("args_data", "args"),
    ("duration_ms", "duration_ms"),
    ("status", "status"),
    ("error", "error"),
)


class _JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for attr, key in _EXTRA_FIELDS:
            if hasattr(record, attr):
                entry[key] = getattr(record, attr)
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = str(record.exc_info[1])
        return json.dumps(entry, default=str)


def setup_logging(log_file: Path | None = None, level: str | int = logging.INFO) -> logging.Logger:
    """Configure the package logger for JSON output.

    Safe to call repeatedly: the stderr handler is installed once, and a file
    handler for a different path replaces the previous one.
    """
    logger = logging.getLogger(LOGGER_NAME)

    with _setup_lock:
        logger.setLevel(level)

        if not any(h.get_name() == _STDERR_HANDLER_NAME for h in logger.handlers):
            stderr_handler = logging.StreamHandler(sys.stderr)
            stderr_handler.set_name(_STDERR_HANDLER_NAME)
            stderr_handler.setFormatter(_JsonFormatter())
            logger.addHandler(stderr_handler)

        if log_file is None:
            return logger

        target_filename = os.path.abspath(str(log_file))
        for h in logger.handlers[:]:
            if not isinstance(h, RotatingFileHandler):
                continue
            if h.baseFilename == target_filename:
                return logger
            # Different path: remove stale handler to avoid leaks / duplicates.
            logger.removeHandler(h)
            h.close()

        handler = RotatingFileHandler(
            str(log_file),
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
        )
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
    return logger
