"""Accounting service client for record fetching, creation and updates.

This module provides the LedgerClient class. It includes:
- Single-record fetch, create and full update for every record type
- Count-then-page listing and ad-hoc queries
- Journal entry, payment method and exchange rate accessors
"""

from datetime import date
from typing import Any, AsyncIterator, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from ledgerlink.core.config import Settings, settings
from ledgerlink.models.base import Record
from ledgerlink.models.envelopes import record_envelope
from ledgerlink.models.exchange_rate import ExchangeRate
from ledgerlink.models.journal_entry import JournalEntry
from ledgerlink.models.payment_method import PaymentMethod
from ledgerlink.services.envelope import decode_envelope
from ledgerlink.services.faults import parse_failure
from ledgerlink.services.pager import QueryPager
from ledgerlink.services.transport import RawResponse, Transport
from ledgerlink.services.updates import update_record

R = TypeVar("R", bound=Record)
M = TypeVar("M", bound=BaseModel)


class LedgerClient:
    """Client for the accounting service records API.

    Every call is a single attempt: a failed request raises one
    ``LedgerError`` and multi-call operations stop at the first failure.

    Example:
        ```python
        async with LedgerClient(
            base_url="https://quickbooks.api.intuit.com",
            realm_id="123145",
            access_token="token",
        ) as client:
            entries = await client.find_journal_entries()
        ```
    """

    DEFAULT_PAGE_SIZE = QueryPager.DEFAULT_PAGE_SIZE

    def __init__(
        self,
        base_url: str,
        realm_id: str,
        access_token: str,
        minor_version: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize LedgerClient.

        Args:
            base_url: Service root URL
            realm_id: Company id the requests are scoped to
            access_token: OAuth2 bearer token
            minor_version: Optional API minor version
            page_size: Records per page when listing. Defaults to 1000.
            timeout: Request timeout in seconds
            http_client: Optional preconfigured httpx.AsyncClient
        """
        self.transport = Transport(
            base_url=base_url,
            realm_id=realm_id,
            access_token=access_token,
            minor_version=minor_version,
            timeout=timeout,
            http_client=http_client,
        )
        self.pager = QueryPager(self._execute_query, page_size=page_size)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, **kwargs: Any) -> "LedgerClient":
        """Build a client from ``LEDGERLINK_*`` settings."""
        config = config or settings
        return cls(
            base_url=config.base_url,
            realm_id=config.realm_id,
            access_token=config.access_token,
            minor_version=config.minor_version or None,
            page_size=config.page_size,
            timeout=config.request_timeout,
            **kwargs,
        )

    @property
    def page_size(self) -> int:
        return self.pager.page_size

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self.transport.close()

    async def __aenter__(self) -> "LedgerClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # =========================================================================
    # Single-call Path
    # =========================================================================

    def _decode(self, response: RawResponse, shape: Type[M]) -> M:
        """Decode a response, raising the parsed failure on error statuses."""
        if not response.is_success:
            raise parse_failure(
                response.status_code,
                response.body,
                response.content_encoding,
            )
        return decode_envelope(
            response.body,
            response.content_encoding,
            shape,
            status_code=response.status_code,
        )

    async def _execute_query(self, statement: str, shape: Type[M]) -> M:
        response = await self.transport.query(statement)
        return self._decode(response, shape)

    async def _get(self, path: str, shape: Type[M], params: Optional[Dict[str, Any]] = None) -> M:
        response = await self.transport.get(path, params=params)
        return self._decode(response, shape)

    async def _post(self, path: str, payload: Any, shape: Type[M]) -> M:
        response = await self.transport.post(path, payload)
        return self._decode(response, shape)

    # =========================================================================
    # Generic Record Operations
    # =========================================================================

    async def find_by_id(self, record_type: Type[R], record_id: str) -> R:
        """Fetch one record by Id (``GET <entity>/<id>``)."""
        envelope = await self._get(f"{record_type.endpoint}/{record_id}", record_envelope(record_type))
        return envelope.record

    async def create(self, record: R) -> R:
        """Create a record (``POST <entity>``) and return the stored copy."""
        return await self._submit(record)

    async def _submit(self, record: R) -> R:
        """POST the full record; the service creates or updates by Id."""
        record_type = type(record)
        envelope = await self._post(record_type.endpoint, record.to_payload(), record_envelope(record_type))
        return envelope.record

    async def update(self, record: R) -> R:
        """Full update: missing writable fields are cleared by the service.

        The current SyncToken is fetched first and replaces the one on
        ``record``.
        """
        record_type = type(record)

        async def fetch(record_id: str) -> R:
            return await self.find_by_id(record_type, record_id)

        return await update_record(record, fetch, self._submit)

    async def find_all(self, record_type: Type[R]) -> List[R]:
        """Fetch every record of a type, page by page."""
        return await self.pager.page_all(record_type)

    async def find_page(self, record_type: Type[R], start_position: int, page_size: int) -> List[R]:
        """Fetch one 1-based window of records ordered by Id."""
        return await self.pager.page_one(record_type, start_position, page_size)

    def iter_pages(self, record_type: Type[R], page_size: Optional[int] = None) -> AsyncIterator[List[R]]:
        """Lazily iterate pages of a record type."""
        return self.pager.iter_pages(record_type, page_size)

    async def count(self, record_type: Type[R]) -> int:
        return await self.pager.count(record_type)

    async def query(self, record_type: Type[R], statement: str) -> List[R]:
        """Run an ad-hoc SELECT statement and return the records it matched."""
        return await self.pager.query(record_type, statement)

    # =========================================================================
    # Journal Entries
    # =========================================================================

    async def create_journal_entry(self, entry: JournalEntry) -> JournalEntry:
        return await self.create(entry)

    async def find_journal_entries(self) -> List[JournalEntry]:
        """Fetch the full list of journal entries."""
        return await self.find_all(JournalEntry)

    async def find_journal_entries_by_page(self, start_position: int, page_size: int) -> List[JournalEntry]:
        return await self.find_page(JournalEntry, start_position, page_size)

    async def find_journal_entry_by_id(self, entry_id: str) -> JournalEntry:
        return await self.find_by_id(JournalEntry, entry_id)

    async def query_journal_entries(self, statement: str) -> List[JournalEntry]:
        return await self.query(JournalEntry, statement)

    async def update_journal_entry(self, entry: JournalEntry) -> JournalEntry:
        """Full update of a journal entry."""
        return await self.update(entry)

    # =========================================================================
    # Payment Methods
    # =========================================================================

    async def create_payment_method(self, payment_method: PaymentMethod) -> PaymentMethod:
        return await self.create(payment_method)

    async def find_payment_methods(self) -> List[PaymentMethod]:
        """Fetch the full list of payment methods."""
        return await self.find_all(PaymentMethod)

    async def find_payment_methods_by_page(self, start_position: int, page_size: int) -> List[PaymentMethod]:
        return await self.find_page(PaymentMethod, start_position, page_size)

    async def find_payment_method_by_id(self, payment_method_id: str) -> PaymentMethod:
        return await self.find_by_id(PaymentMethod, payment_method_id)

    async def query_payment_methods(self, statement: str) -> List[PaymentMethod]:
        return await self.query(PaymentMethod, statement)

    async def update_payment_method(self, payment_method: PaymentMethod) -> PaymentMethod:
        """Full update of a payment method."""
        return await self.update(payment_method)

    # =========================================================================
    # Exchange Rates
    # =========================================================================

    async def find_exchange_rates(self) -> List[ExchangeRate]:
        """Fetch the full list of exchange rates."""
        return await self.find_all(ExchangeRate)

    async def find_exchange_rates_by_page(self, start_position: int, page_size: int) -> List[ExchangeRate]:
        return await self.find_page(ExchangeRate, start_position, page_size)

    async def find_exchange_rate_by_currency(
        self,
        currency_code: str,
        as_of: Optional[date] = None,
    ) -> ExchangeRate:
        """Fetch the rate for a source currency, on ``as_of`` or today.

        Args:
            currency_code: ISO source currency code (e.g., "EUR")
            as_of: Optional rate date; the service defaults to today
        """
        params: Dict[str, Any] = {"sourcecurrencycode": currency_code}
        if as_of is not None:
            params["asofdate"] = as_of.isoformat()

        envelope = await self._get(ExchangeRate.endpoint, record_envelope(ExchangeRate), params=params)
        return envelope.record

    async def query_exchange_rates(self, statement: str) -> List[ExchangeRate]:
        return await self.query(ExchangeRate, statement)

    async def update_exchange_rate(self, rate: ExchangeRate) -> ExchangeRate:
        """Full update of the exchange rate for its currency and date."""

        async def fetch(currency_code: str) -> ExchangeRate:
            return await self.find_exchange_rate_by_currency(currency_code, rate.as_of_date)

        return await update_record(rate, fetch, self._submit)
