"""Core client modules."""

from ledgerlink.core.config import Settings, settings
from ledgerlink.core.errors import (
    BodyParseError,
    FaultError,
    LedgerConnectionError,
    LedgerError,
    MissingIdentifierError,
    TransportDecodeError,
)
from ledgerlink.core.logging import LoggerAdapter, get_logger, setup_logging

__all__ = [
    "Settings",
    "settings",
    "LedgerError",
    "LedgerConnectionError",
    "TransportDecodeError",
    "BodyParseError",
    "FaultError",
    "MissingIdentifierError",
    "get_logger",
    "setup_logging",
    "LoggerAdapter",
]
