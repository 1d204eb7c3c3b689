"""Error taxonomy for the accounting service client.

Every failure surfaced by the client is a subclass of ``LedgerError`` and
has a deterministic ``str()`` rendering, suitable both for logging and for
recovering the original fault structure.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ledgerlink.models.envelopes import Failure, FaultErrorItem


class LedgerError(Exception):
    """Base exception for accounting service errors."""
    pass


class LedgerConnectionError(LedgerError):
    """Raised when the service cannot be reached."""
    pass


class TransportDecodeError(LedgerError):
    """Raised when a compressed response body cannot be decompressed."""

    def __init__(self, message: str, content_encoding: Optional[str] = None):
        super().__init__(message)
        self.content_encoding = content_encoding


class BodyParseError(LedgerError):
    """Raised when a body matches neither the expected nor the fault shape.

    Renders as ``"<status_code> <body>"`` so that even HTML error pages from
    an upstream proxy reach the caller verbatim.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"{status_code} {body}")
        self.status_code = status_code
        self.body = body


class FaultError(LedgerError):
    """Raised when the service answers with a well-formed fault envelope.

    The full envelope is kept on ``failure``; ``str()`` re-serializes it to
    its canonical JSON form.
    """

    def __init__(self, failure: "Failure", status_code: Optional[int] = None):
        self.failure = failure
        self.status_code = status_code
        super().__init__(self.render())

    def render(self) -> str:
        return self.failure.model_dump_json(by_alias=True, exclude_none=True)

    @property
    def fault_type(self) -> str:
        return self.failure.fault.type

    @property
    def errors(self) -> List["FaultErrorItem"]:
        return self.failure.fault.errors

    def __str__(self) -> str:
        return self.render()


class MissingIdentifierError(LedgerError):
    """Raised when an update is attempted on a record without an identifier."""

    def __init__(self, entity: str):
        super().__init__(f"missing {entity} id")
        self.entity = entity
