"""Response envelope decoding.

Turns a raw response body into either the caller's success model or a
structured error. Decoding is pure: no I/O and no logging.
"""

import gzip
import zlib
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ledgerlink.core.errors import BodyParseError, FaultError, TransportDecodeError
from ledgerlink.models.envelopes import Failure

M = TypeVar("M", bound=BaseModel)

GZIP_ENCODINGS = frozenset({"gzip", "x-gzip"})


def decompress_body(body: bytes, content_encoding: Optional[str]) -> bytes:
    """Undo the transport compression named by ``Content-Encoding``.

    Unknown or absent encodings are passed through untouched.

    Raises:
        TransportDecodeError: If a gzip body cannot be decompressed
    """
    encoding = (content_encoding or "").strip().lower()
    if encoding not in GZIP_ENCODINGS:
        return body

    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        raise TransportDecodeError(
            f"failed to decompress {encoding} body: {e}",
            content_encoding=encoding,
        ) from e


def body_text(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


def decode_envelope(
    body: bytes,
    content_encoding: Optional[str],
    shape: Type[M],
    status_code: int = 200,
) -> M:
    """Decode a success response body into ``shape``.

    Args:
        body: Raw response body, possibly still compressed
        content_encoding: Value of the Content-Encoding header
        shape: Pydantic model describing the expected success envelope
        status_code: HTTP status, used in error renderings

    Returns:
        The populated ``shape`` instance

    Raises:
        TransportDecodeError: If the body cannot be decompressed
        FaultError: If the body is a well-formed fault envelope instead
        BodyParseError: If the body matches neither shape
    """
    raw = decompress_body(body, content_encoding)

    try:
        return shape.model_validate_json(raw)
    except ValidationError as e:
        failure = Failure.from_body(raw)
        if failure is not None:
            raise FaultError(failure, status_code) from e
        raise BodyParseError(status_code, body_text(raw)) from e
