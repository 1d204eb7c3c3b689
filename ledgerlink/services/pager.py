"""Count-then-page draining of query results.

The service caps every data query at ``MAXRESULTS`` rows, so a full listing
first asks for ``COUNT(*)`` and then walks 1-based ``STARTPOSITION`` windows
ordered by ``Id`` until the count is covered.

Pages are fetched strictly one after another. The count call and every
page call are independent round trips without snapshot isolation: records
created or deleted while a drain is running can make the result miss or
repeat entries relative to the reported total. That is a property of the
remote protocol and is left as-is.
"""

import logging
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ledgerlink.models.base import Record
from ledgerlink.models.envelopes import CountEnvelope, query_envelope

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)
M = TypeVar("M", bound=BaseModel)

QueryExecutor = Callable[[str, Type[M]], Awaitable[M]]

COUNT_QUERY = "SELECT COUNT(*) FROM {entity}"
PAGE_QUERY = "SELECT * FROM {entity} ORDERBY Id STARTPOSITION {start} MAXRESULTS {size}"


class PageWindow(BaseModel):
    """One 1-based slice of a result set."""

    model_config = ConfigDict(frozen=True)

    start_position: int = Field(ge=1)
    max_results: int = Field(ge=1)

    def next(self) -> "PageWindow":
        return PageWindow(
            start_position=self.start_position + self.max_results,
            max_results=self.max_results,
        )


def count_query(entity: str) -> str:
    return COUNT_QUERY.format(entity=entity)


def page_query(entity: str, window: PageWindow) -> str:
    return PAGE_QUERY.format(
        entity=entity,
        start=window.start_position,
        size=window.max_results,
    )


def page_windows(total_count: int, page_size: int) -> List[PageWindow]:
    """Windows covering ``total_count`` rows, ``page_size`` at a time."""
    windows: List[PageWindow] = []
    if total_count <= 0:
        return windows

    window = PageWindow(start_position=1, max_results=page_size)
    while window.start_position <= total_count:
        windows.append(window)
        window = window.next()
    return windows


class QueryPager:
    """Runs record queries through a single-call query executor.

    Args:
        execute: Coroutine function running one query statement and decoding
            the response into the given envelope model
        page_size: Default number of records per page
    """

    DEFAULT_PAGE_SIZE = 1000

    def __init__(self, execute: QueryExecutor, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.execute = execute
        self.page_size = page_size

    def _page_size(self, page_size: Optional[int]) -> int:
        size = page_size if page_size is not None else self.page_size
        if size < 1:
            raise ValueError(f"page_size must be positive, got {size}")
        return size

    async def count(self, record_type: Type[R]) -> int:
        """Number of stored records of ``record_type``."""
        envelope = await self.execute(count_query(record_type.entity_name), CountEnvelope)
        return envelope.total_count

    async def query(self, record_type: Type[R], statement: str) -> List[R]:
        """Run a caller-supplied SELECT statement verbatim.

        Returns only the page the service answers with; the statement's own
        STARTPOSITION/MAXRESULTS clauses control which one.
        """
        envelope = await self.execute(statement, query_envelope(record_type))
        return envelope.query_response.records

    async def page_one(
        self,
        record_type: Type[R],
        start_position: int,
        page_size: Optional[int] = None,
    ) -> List[R]:
        """Fetch a single window of records ordered by Id."""
        window = PageWindow(
            start_position=start_position,
            max_results=self._page_size(page_size),
        )
        return await self.query(record_type, page_query(record_type.entity_name, window))

    async def iter_pages(
        self,
        record_type: Type[R],
        page_size: Optional[int] = None,
    ) -> AsyncIterator[List[R]]:
        """Lazily yield every page of ``record_type``.

        Each call starts over with a fresh count. Nothing is fetched for an
        empty result set beyond the count itself.
        """
        size = self._page_size(page_size)
        entity = record_type.entity_name

        total = await self.count(record_type)
        if total == 0:
            logger.debug(f"No {entity} records, skipping page queries")
            return

        for window in page_windows(total, size):
            logger.debug(
                f"Fetching {entity} page at {window.start_position} "
                f"({window.max_results} per page, {total} total)"
            )
            yield await self.query(record_type, page_query(entity, window))

    async def page_all(
        self,
        record_type: Type[R],
        page_size: Optional[int] = None,
    ) -> List[R]:
        """Fetch every record of ``record_type`` in ascending Id order.

        Any failing call aborts the whole drain; records gathered so far are
        discarded along with the raised error.
        """
        records: List[R] = []
        async for page in self.iter_pages(record_type, page_size):
            records.extend(page)
        return records
