"""Record schemas and wire envelopes."""

from ledgerlink.models.base import ModificationMetaData, Record, ReferenceType, WireModel
from ledgerlink.models.envelopes import (
    CountEnvelope,
    Envelope,
    Failure,
    FaultDetail,
    FaultErrorItem,
    QueryResponse,
    query_envelope,
    record_envelope,
)
from ledgerlink.models.exchange_rate import ExchangeRate
from ledgerlink.models.journal_entry import (
    GlobalTaxCalculation,
    JournalEntry,
    JournalEntryLine,
    JournalEntryLineDetail,
    JournalEntryLineEntity,
    LineDetailType,
    LineEntityType,
    PostingType,
    TaxApplicableOn,
)
from ledgerlink.models.payment_method import PaymentMethod

__all__ = [
    "WireModel",
    "Record",
    "ReferenceType",
    "ModificationMetaData",
    "Envelope",
    "CountEnvelope",
    "QueryResponse",
    "Failure",
    "FaultDetail",
    "FaultErrorItem",
    "record_envelope",
    "query_envelope",
    "JournalEntry",
    "JournalEntryLine",
    "JournalEntryLineDetail",
    "JournalEntryLineEntity",
    "GlobalTaxCalculation",
    "PostingType",
    "TaxApplicableOn",
    "LineEntityType",
    "LineDetailType",
    "PaymentMethod",
    "ExchangeRate",
]
