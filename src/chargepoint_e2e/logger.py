"""
Diagnostic logging for the charge point E2E suite.

Lines look like::

    [2026-10-19T09:21:07.412Z] INFO [should create a new charge point] Starting test

The timestamp and color are configurable through ``LoggingSettings``. The
test context belongs to a ``TestLogger`` instance, so each test gets its own
tagged logger instead of sharing one mutable context.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from .config import LoggingSettings, get_settings

LOGGER_NAME = "chargepoint_e2e"

COLORS = {
    logging.DEBUG: "\x1b[36m",  # Cyan
    logging.INFO: "\x1b[32m",  # Green
    logging.WARNING: "\x1b[33m",  # Yellow
    logging.ERROR: "\x1b[31m",  # Red
}
RESET = "\x1b[0m"

LEVEL_LABELS = {logging.WARNING: "WARN"}


def format_data(data: Any) -> str:
    """
    Render a log payload for the line following the message.

    Exceptions are rendered with their traceback when they have one, dicts
    and sequences as indented JSON, anything else with ``str()``.
    """
    if isinstance(data, BaseException):
        if data.__traceback__ is not None:
            return "".join(traceback.format_exception(data)).rstrip()
        return f"{type(data).__name__}: {data}"
    if isinstance(data, (dict, list, tuple)):
        return json.dumps(data, indent=2, default=str)
    return str(data)


class DiagnosticFormatter(logging.Formatter):
    """Formatter producing timestamped, optionally colored diagnostic lines."""

    def __init__(self, show_timestamps: bool = True, use_colors: bool = True):
        super().__init__()
        self.show_timestamps = show_timestamps
        self.use_colors = use_colors

    def format_timestamp(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        timestamp = (
            f"[{self.format_timestamp(record)}] " if self.show_timestamps else ""
        )
        level = LEVEL_LABELS.get(record.levelno, record.levelname)
        context = getattr(record, "test_context", None)
        context_tag = f"[{context}] " if context else ""

        line = f"{timestamp}{level} {context_tag}{record.getMessage()}"
        if self.use_colors and record.levelno in COLORS:
            line = f"{COLORS[record.levelno]}{line}{RESET}"

        if hasattr(record, "data"):
            line += "\n" + format_data(record.data)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class DiagnosticHandler(logging.StreamHandler):
    """Console handler installed by ``configure_logging``."""


def configure_logging(
    settings: Optional[LoggingSettings] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the suite logger.

    Calling this again replaces the previously installed handler.

    Args:
        settings: Logger settings; defaults to the cached suite settings.
        stream: Output stream; defaults to stdout.

    Returns:
        The configured ``chargepoint_e2e`` logger.
    """
    if settings is None:
        settings = get_settings().logging

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, DiagnosticHandler):
            logger.removeHandler(handler)

    handler = DiagnosticHandler(stream or sys.stdout)
    handler.setFormatter(
        DiagnosticFormatter(
            show_timestamps=settings.timestamps,
            use_colors=settings.colors,
        )
    )
    logger.addHandler(handler)
    logger.setLevel(settings.level)
    logger.propagate = False
    return logger


class TestLogger(logging.LoggerAdapter):
    """Logger tagging every line with the name of the running test."""

    __test__ = False

    def __init__(
        self,
        test_name: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger or logging.getLogger(LOGGER_NAME), {})
        self.test_name = test_name

    def set_test_context(self, test_name: str) -> None:
        self.test_name = test_name

    def clear_test_context(self) -> None:
        self.test_name = None

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("test_context", self.test_name)
        kwargs["extra"] = extra
        return msg, kwargs

    def _emit(self, level: int, message: str, data: Any, **kwargs: Any) -> None:
        if data is not None:
            kwargs["extra"] = {**(kwargs.get("extra") or {}), "data": data}
        self.log(level, message, **kwargs)

    def debug(self, message: str, data: Any = None, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, message, data, **kwargs)

    def info(self, message: str, data: Any = None, **kwargs: Any) -> None:
        self._emit(logging.INFO, message, data, **kwargs)

    def warning(self, message: str, data: Any = None, **kwargs: Any) -> None:
        self._emit(logging.WARNING, message, data, **kwargs)

    warn = warning

    def error(self, message: str, error: Any = None, **kwargs: Any) -> None:
        self._emit(logging.ERROR, message, error, **kwargs)


def get_test_logger(test_name: Optional[str] = None) -> TestLogger:
    """Return a logger tagged with ``test_name``."""
    return TestLogger(test_name)


# Untagged logger for code running outside a test
logger = TestLogger()


def debug(message: str, data: Any = None) -> None:
    logger.debug(message, data)


def info(message: str, data: Any = None) -> None:
    logger.info(message, data)


def warn(message: str, data: Any = None) -> None:
    logger.warn(message, data)


def error(message: str, error: Any = None) -> None:
    logger.error(message, error)
