"""
Service Logging

Console output for operators plus an optional log file that rolls over at
midnight, keeping one file per day.

Usage:
    from bp_calculator.utils import setup_logging, get_logger

    setup_logging("INFO", "logs/app.txt")
    logger = get_logger(__name__)
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_BACKUP_DAYS = 31

_LEVEL_COLORS = {
    logging.DEBUG:    "\033[36m",
    logging.INFO:     "\033[32m",
    logging.WARNING:  "\033[33m",
    logging.ERROR:    "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"
_OWNED_ATTR = "_bp_calculator_handler"


class StructuredFormatter(logging.Formatter):
    """
    One line per record: UTC timestamp, level, logger name, message.

    Colours are applied only when `use_color` is set, so piped or captured
    output stays plain.
    """

    def __init__(self, use_color: bool = False):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        line = f"[{stamp}] {record.levelname:8} [{record.name}] {record.getMessage()}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        if self.use_color:
            color = _LEVEL_COLORS.get(record.levelno, "")
            line = f"{color}{line}{_RESET}"
        return line


def daily_file_handler(
    log_file: str,
    backup_days: int = DEFAULT_BACKUP_DAYS,
) -> logging.handlers.TimedRotatingFileHandler:
    """File sink that starts a new file every midnight (UTC)."""
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        path,
        when="midnight",
        backupCount=backup_days,
        encoding="utf-8",
        utc=True,
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    backup_days: int = DEFAULT_BACKUP_DAYS,
) -> None:
    """
    Configure the root logger for the service.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional path of the rolling log file
        backup_days: How many rotated daily files to keep
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace only handlers installed by a previous call
    for handler in list(root_logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter(use_color=sys.stdout.isatty()))
    handlers = [console_handler]

    if log_file:
        handlers.append(daily_file_handler(log_file, backup_days))

    for handler in handlers:
        setattr(handler, _OWNED_ATTR, True)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass `__name__`)."""
    return logging.getLogger(name)
