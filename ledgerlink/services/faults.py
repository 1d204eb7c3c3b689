"""Error-response parsing for non-success HTTP statuses."""

from typing import Optional

from ledgerlink.core.errors import BodyParseError, FaultError, LedgerError, TransportDecodeError
from ledgerlink.models.envelopes import Failure
from ledgerlink.services.envelope import body_text, decompress_body


def parse_failure(
    status_code: int,
    body: bytes,
    content_encoding: Optional[str] = None,
) -> LedgerError:
    """Build the error for a failed response.

    The error is returned, not raised, so the caller decides where it
    surfaces. This never raises: anything that is not a well-formed fault
    envelope degrades to a ``BodyParseError`` rendering as
    ``"<status_code> <body>"``.

    Args:
        status_code: HTTP status of the failed response
        body: Raw response body, possibly still compressed
        content_encoding: Value of the Content-Encoding header

    Returns:
        FaultError, BodyParseError, or TransportDecodeError when the body
        could not be decompressed
    """
    try:
        raw = decompress_body(body, content_encoding)
    except TransportDecodeError as e:
        return e

    failure = Failure.from_body(raw)
    if failure is None:
        return BodyParseError(status_code, body_text(raw))

    return FaultError(failure, status_code)
