"""Pytest configuration and fixtures for tests.

Provides an in-memory stand-in for the HTTP transport that answers the
count and page queries from a list of stored records.
"""

import gzip
import json
import re
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from ledgerlink.services.client import LedgerClient
from ledgerlink.services.transport import RawResponse

PAGE_RE = re.compile(
    r"SELECT \* FROM (?P<entity>\w+) ORDERBY Id STARTPOSITION (?P<start>\d+) MAXRESULTS (?P<size>\d+)"
)
COUNT_RE = re.compile(r"SELECT COUNT\(\*\) FROM (?P<entity>\w+)")

NOT_FOUND_FAULT = {
    "Fault": {
        "Error": [{"Message": "Object Not Found", "Detail": "Id=99", "code": "610"}],
        "type": "ValidationFault",
    },
    "time": "2024-01-01T00:00:00Z",
}


def raw_json(
    payload: Any,
    status_code: int = 200,
    compress: bool = False,
) -> RawResponse:
    """Build a RawResponse carrying ``payload`` as JSON, optionally gzipped."""
    body = json.dumps(payload).encode("utf-8")
    headers = {"Content-Type": "application/json"}
    if compress:
        body = gzip.compress(body)
        headers["Content-Encoding"] = "gzip"
    return RawResponse(status_code, httpx.Headers(headers), body)


def raw_text(text: str, status_code: int) -> RawResponse:
    return RawResponse(status_code, httpx.Headers({"Content-Type": "text/plain"}), text.encode("utf-8"))


class FakeTransport:
    """Records every call and answers from a simulated record store.

    Args:
        records: Stored records per entity name, as wire dicts
        fail_on_query: 1-based index of the query call that fails with a fault
        compress: Whether to gzip every response body
    """

    def __init__(
        self,
        records: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        fail_on_query: Optional[int] = None,
        compress: bool = False,
    ):
        self.records = records or {}
        self.fail_on_query = fail_on_query
        self.compress = compress
        self.queries: List[str] = []
        self.gets: List[Tuple[str, Optional[dict]]] = []
        self.posts: List[Tuple[str, Any]] = []
        self.get_responses: Dict[str, RawResponse] = {}
        self.post_response: Optional[RawResponse] = None
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.queries) + len(self.gets) + len(self.posts)

    async def query(self, statement: str, params: Optional[dict] = None) -> RawResponse:
        self.queries.append(statement)
        if self.fail_on_query == len(self.queries):
            return raw_json(NOT_FOUND_FAULT, status_code=400, compress=self.compress)

        match = COUNT_RE.fullmatch(statement)
        if match:
            total = len(self.records.get(match["entity"], []))
            return raw_json(
                {"QueryResponse": {"totalCount": total}, "time": "2024-01-01T00:00:00Z"},
                compress=self.compress,
            )

        match = PAGE_RE.fullmatch(statement)
        if match:
            entity = match["entity"]
            start, size = int(match["start"]), int(match["size"])
            page = self.records.get(entity, [])[start - 1:start - 1 + size]
            body: Dict[str, Any] = {"startPosition": start, "maxResults": len(page)}
            if page:
                body[entity] = page
            return raw_json({"QueryResponse": body}, compress=self.compress)

        return raw_text(f"unsupported query: {statement}", 400)

    async def get(self, path: str, params: Optional[dict] = None) -> RawResponse:
        self.gets.append((path, params))
        response = self.get_responses.get(path)
        if response is None:
            return raw_json(NOT_FOUND_FAULT, status_code=400)
        return response

    async def post(self, path: str, payload: Any, params: Optional[dict] = None) -> RawResponse:
        self.posts.append((path, payload))
        if self.post_response is not None:
            return self.post_response
        return raw_json({type_name_for(path): payload, "time": "2024-01-01T00:00:00Z"})

    async def close(self) -> None:
        self.closed = True


ENTITY_BY_ENDPOINT = {
    "journalentry": "JournalEntry",
    "paymentmethod": "PaymentMethod",
    "exchangerate": "ExchangeRate",
}


def type_name_for(path: str) -> str:
    return ENTITY_BY_ENDPOINT[path.split("/")[0]]


def make_records(count: int, entity: str = "PaymentMethod") -> List[Dict[str, Any]]:
    """Stored wire records with ascending numeric Ids."""
    return [
        {"Id": str(i), "SyncToken": "0", "Name": f"{entity} {i}"}
        for i in range(1, count + 1)
    ]


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(fake_transport: FakeTransport) -> LedgerClient:
    """LedgerClient whose transport is the in-memory fake."""
    ledger = LedgerClient(
        base_url="https://ledger.example.com",
        realm_id="1234",
        access_token="test-token",
        page_size=5,
    )
    ledger.transport = fake_transport
    return ledger
