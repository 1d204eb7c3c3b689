"""Async client for a tabular-record accounting service API."""

from ledgerlink.core.errors import (
    BodyParseError,
    FaultError,
    LedgerConnectionError,
    LedgerError,
    MissingIdentifierError,
    TransportDecodeError,
)
from ledgerlink.models import ExchangeRate, JournalEntry, PaymentMethod, Record
from ledgerlink.services.client import LedgerClient

__version__ = "0.1.0"

__all__ = [
    "LedgerClient",
    "Record",
    "JournalEntry",
    "PaymentMethod",
    "ExchangeRate",
    "LedgerError",
    "LedgerConnectionError",
    "TransportDecodeError",
    "BodyParseError",
    "FaultError",
    "MissingIdentifierError",
]
