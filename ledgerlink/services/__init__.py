"""Service layer: transport, decoding, paging, updates and the client."""

from ledgerlink.services.client import LedgerClient
from ledgerlink.services.envelope import decode_envelope, decompress_body
from ledgerlink.services.faults import parse_failure
from ledgerlink.services.pager import PageWindow, QueryPager
from ledgerlink.services.transport import RawResponse, Transport
from ledgerlink.services.updates import update_record

__all__ = [
    "LedgerClient",
    "decode_envelope",
    "decompress_body",
    "parse_failure",
    "PageWindow",
    "QueryPager",
    "RawResponse",
    "Transport",
    "update_record",
]
