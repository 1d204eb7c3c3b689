"""HTTP transport for the accounting service API.

Requests are sent once; there is no retry or backoff. Response bodies are
read raw, so a gzip body reaches the envelope decoder still compressed
together with its Content-Encoding header.
"""

import logging
from typing import Any, Dict, Mapping, NamedTuple, Optional

import httpx

from ledgerlink.core.errors import LedgerConnectionError
from ledgerlink.core.logging import LoggerAdapter

logger = logging.getLogger(__name__)


class RawResponse(NamedTuple):
    """Status, headers and undecoded body of one response."""

    status_code: int
    headers: Mapping[str, str]
    body: bytes

    @property
    def content_encoding(self) -> Optional[str]:
        return self.headers.get("Content-Encoding")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport:
    """Thin httpx wrapper exposing the get/post/query primitives.

    Example:
        ```python
        async with Transport(
            base_url="https://quickbooks.api.intuit.com",
            realm_id="123145",
            access_token="token",
        ) as transport:
            response = await transport.get("journalentry/7")
        ```
    """

    REQUEST_TIMEOUT = 30.0  # seconds

    def __init__(
        self,
        base_url: str,
        realm_id: str,
        access_token: str,
        minor_version: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Transport.

        Args:
            base_url: Service root URL (e.g., "https://quickbooks.api.intuit.com")
            realm_id: Company id the requests are scoped to
            access_token: OAuth2 bearer token
            minor_version: Optional API minor version sent on every request
            timeout: Request timeout in seconds. Defaults to 30.
            http_client: Optional preconfigured client. It is not closed by
                ``close()``; its owner closes it.
        """
        self.base_url = base_url.rstrip("/")
        self.realm_id = realm_id
        self.access_token = access_token
        self.minor_version = minor_version
        self.timeout = timeout if timeout is not None else self.REQUEST_TIMEOUT

        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None
        self._log = LoggerAdapter(logger, {"realm": realm_id})

    @property
    def company_url(self) -> str:
        return f"{self.base_url}/v3/company/{self.realm_id}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _params(self, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        merged = dict(params or {})
        if self.minor_version:
            merged.setdefault("minorversion", self.minor_version)
        return merged

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Any] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> RawResponse:
        """Send one request and read the raw (still encoded) body.

        Raises:
            LedgerConnectionError: If the request cannot be completed
        """
        client = await self._get_client()
        url = f"{self.company_url}/{path.lstrip('/')}"

        request = client.build_request(
            method,
            url,
            params=self._params(params),
            json=json_data,
            content=content,
            headers={**self._headers(), **(headers or {})},
        )

        self._log.debug(f"{method} {path}")
        try:
            response = await client.send(request, stream=True)
            try:
                body = b"".join([chunk async for chunk in response.aiter_raw()])
            finally:
                await response.aclose()
        except httpx.TimeoutException as e:
            raise LedgerConnectionError(f"Request to {url} timed out: {e}") from e
        except httpx.TransportError as e:
            raise LedgerConnectionError(f"Cannot connect to {self.base_url}: {e}") from e

        self._log.debug(f"{method} {path} -> {response.status_code} ({len(body)} bytes)")
        return RawResponse(response.status_code, response.headers, body)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> RawResponse:
        return await self._send("GET", path, params=params)

    async def post(
        self,
        path: str,
        payload: Any,
        params: Optional[Dict[str, Any]] = None,
    ) -> RawResponse:
        return await self._send("POST", path, params=params, json_data=payload)

    async def query(self, statement: str, params: Optional[Dict[str, Any]] = None) -> RawResponse:
        """POST a query statement as plain text to the query endpoint."""
        return await self._send(
            "POST",
            "query",
            params=params,
            content=statement.encode("utf-8"),
            headers={"Content-Type": "application/text"},
        )
