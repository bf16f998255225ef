"""Logging setup for the update-notifier CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers. The CLI
installs handlers through :func:`setup_logging`: a stderr console handler
(text or JSON) and, optionally, a rotating file that always receives JSON.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ANSI SGR codes by level number
LEVEL_COLORS = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "35",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "timestamp": created.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class TextFormatter(logging.Formatter):
    """Plain text lines; the level name is coloured when stderr is a TTY."""

    def __init__(self, use_colors: bool = True):
        super().__init__(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors and sys.stderr.isatty()

    def formatMessage(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().formatMessage(record)
        # Colour a copy so other handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        code = LEVEL_COLORS.get(record.levelno, "0")
        colored.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().formatMessage(colored)


def setup_logging(
    level: str = "WARNING",
    format_type: str = "text",
    log_file: Optional[str] = None,
    use_colors: bool = True,
    quiet: bool = False,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        format_type: "text" or "json" for the console handler
        log_file: Optional path of a rotating JSON log file
        use_colors: Colour level names on a terminal (text mode only)
        quiet: Skip the console handler
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep

    Example:
        >>> setup_logging(level="DEBUG")
        >>> setup_logging(level="INFO", log_file="notifier.log", quiet=True)
    """
    root = logging.getLogger()
    root.handlers.clear()

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING
        print(f"Warning: Invalid log level '{level}', using WARNING", file=sys.stderr)
    root.setLevel(log_level)

    handlers: list[logging.Handler] = []
    # stdout carries command output, so logs go to stderr
    if not quiet:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(JSONFormatter() if format_type == "json" else TextFormatter(use_colors=use_colors))
        handlers.append(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(log_level)
        root.addHandler(handler)

    root.debug("Logging configured: level=%s, format=%s, file=%s", level, format_type, log_file or "none")


def reset_logging() -> None:
    """Close and remove root handlers; used by tests between runs."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
