"""Logging configuration for the client library."""

import logging
import sys
from typing import Any, Optional, TextIO

from ledgerlink.core.config import settings

_HANDLER_MARK = "_ledgerlink_console"


def setup_logging(debug: Optional[bool] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a console handler to the ``ledgerlink`` logger.

    Only the library's own logger is touched: the root logger and any
    handlers the host application installed are left alone. Calling this
    again replaces the handler it added before, so records are never
    emitted twice.

    Args:
        debug: Log at DEBUG instead of INFO. Defaults to ``settings.debug``.
        stream: Output stream. Defaults to stdout.

    Returns:
        The configured ``ledgerlink`` logger
    """
    debug = settings.debug if debug is None else debug
    log_level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    library_logger = logging.getLogger("ledgerlink")
    library_logger.setLevel(log_level)

    for handler in library_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARK, False):
            library_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_MARK, True)
    library_logger.addHandler(console_handler)

    # The handler above already prints these records
    library_logger.propagate = False

    return library_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``ledgerlink`` namespace.

    Args:
        name: The name of the module (typically __name__)

    Returns:
        A logger instance
    """
    if name == "ledgerlink" or name.startswith("ledgerlink."):
        return logging.getLogger(name)
    return logging.getLogger(f"ledgerlink.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that appends context to log messages.

    Usage:
        logger = LoggerAdapter(get_logger(__name__), {"realm": "123"})
        logger.debug("GET journalentry/7")  # Logs: "GET journalentry/7 - realm=123"
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        """Process the log message to include extra context."""
        extra = " - ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"{msg} - {extra}" if extra else msg, kwargs
