"""Full-record updates carrying the current version token.

The service requires the latest ``SyncToken`` on every update. The token is
read fresh right before the write and overwrites whatever the caller put on
the record. This is a blind overwrite, not compare-and-swap: a change made
by someone else between the read and the write is not detected here. If
the service rejects the stale write, its fault surfaces as ``FaultError``.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from ledgerlink.core.errors import MissingIdentifierError
from ledgerlink.models.base import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


async def update_record(
    record: R,
    fetch: Callable[[str], Awaitable[R]],
    submit: Callable[[R], Awaitable[R]],
) -> R:
    """Refresh the version token on ``record`` and submit it.

    Args:
        record: Full record payload to write; its ``sync_token`` is replaced
        fetch: Loads the persisted record for a record key
        submit: Writes the record and returns the decoded result

    Returns:
        The record as returned by ``submit``

    Raises:
        MissingIdentifierError: If the record has no key, before any call
        LedgerError: Whatever ``fetch`` or ``submit`` raise
    """
    key = record.record_key
    if not key:
        raise MissingIdentifierError(record.entity_name or type(record).__name__)

    current = await fetch(key)

    if record.sync_token is not None and record.sync_token != current.sync_token:
        logger.debug(
            f"Replacing caller SyncToken {record.sync_token} with "
            f"{current.sync_token} for {record.entity_name} {key}"
        )
    record.sync_token = current.sync_token

    return await submit(record)
