"""
Centralized Logging

Architectural Intent:
- One stderr handler on the "azticket" logger, human-readable or JSON
- Operator-facing output (menus, results) stays on stdout via print/prompts;
  logs are diagnostics only
- Level comes from --debug / --verbose, else the configured log_level
"""

import json
import logging
import sys
from datetime import datetime, UTC

LOGGER_NAME = "azticket"
HUMAN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def resolve_level(debug: bool = False, verbose: bool = False, configured: str = "WARNING") -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    level = logging.getLevelName(str(configured).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int = logging.WARNING, json_format: bool = False) -> logging.Logger:
    """Install a single stderr handler on the package logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.)
        json_format: Emit one JSON object per line instead of plain text.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(HUMAN_FORMAT))
    logger.addHandler(handler)
    return logger
