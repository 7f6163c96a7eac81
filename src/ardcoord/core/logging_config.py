"""
Logging setup for ardcoord.

Console logs go to stderr so they never interleave with conversion output
on stdout. Conversion records carry their context (input kind, zone,
hemisphere, cell, timing, error code) as ``extra=`` fields; both
formatters render those fields and ignore any others.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ardcoord.core.config import get_settings
from ardcoord.core.errors import ConfigurationError


CONVERSION_FIELDS = (
    "input_kind",
    "zone",
    "hemisphere",
    "cell",
    "duration_ms",
    "error_code",
)

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def conversion_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Conversion fields attached to a record, in CONVERSION_FIELDS order."""
    return {
        field: getattr(record, field)
        for field in CONVERSION_FIELDS
        if hasattr(record, field)
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line, for log files.

    Carries the record's level, logger, source location and message,
    followed by whatever conversion fields the record has.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "source": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        entry.update(conversion_context(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Single-line console records with the conversion context appended.

    ``zone=14 cell=14/033113131312`` style pairs follow the message. With
    ``colored`` the level tag is wrapped in an ANSI color.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, colored: bool = False):
        super().__init__("%(levelname)s %(name)s: %(message)s")
        self.colored = colored

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if self.colored and color:
            line = f"{color}{record.levelname}{self.RESET}{line[len(record.levelname):]}"

        context = conversion_context(record)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line = f"{line} [{pairs}]"
        return line


def get_log_level(level_name: str) -> int:
    """
    Convert a level name to its logging constant.

    Args:
        level_name: DEBUG, INFO, WARNING, ERROR or CRITICAL, any case

    Returns:
        Logging level constant

    Raises:
        ConfigurationError: If the name is not a level
    """
    name = level_name.upper()
    if name not in LEVEL_NAMES:
        raise ConfigurationError(
            f"Unknown log level '{level_name}'; expected one of {', '.join(LEVEL_NAMES)}",
            config_key="log_level",
        )
    return logging.getLevelName(name)


def _file_handler(log_file: Path, level: int, json_logs: bool) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: Optional[bool] = None,
    enable_console: bool = True,
) -> None:
    """
    Configure process-wide logging.

    Arguments left as None fall back to the values in Settings.

    Args:
        log_level: Log level name
        log_file: Path of a rotating log file, if any
        json_logs: Whether the log file is written as JSON lines
        enable_console: Whether to log to stderr

    Raises:
        ConfigurationError: If the log level name is unknown
    """
    settings = get_settings()
    level = get_log_level(log_level or settings.log_level)
    log_file = log_file or settings.log_file
    json_logs = settings.json_logs if json_logs is None else json_logs

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if enable_console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(ConsoleFormatter(colored=settings.environment == "development"))
        root.addHandler(console)

    if log_file:
        root.addHandler(_file_handler(log_file, level, json_logs))

    # pyproj reports network/grid lookups at INFO
    logging.getLogger("pyproj").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically called with __name__."""
    return logging.getLogger(name)
