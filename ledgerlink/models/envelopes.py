"""Wire envelopes wrapping success payloads and faults.

Success bodies wrap a single record under its entity name, or a
``QueryResponse`` object holding a page of records plus paging metadata.
Fault bodies carry one or more error items under ``Fault.Error``.
"""

from functools import lru_cache
from typing import List, Optional, Type, TypeVar, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, create_model

from ledgerlink.models.base import Record

R = TypeVar("R", bound=Record)


# =============================================================================
# Fault Envelope
# =============================================================================


class FaultErrorItem(BaseModel):
    """One error reported inside a fault."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    message: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("Message", "message"),
        serialization_alias="Message",
    )
    detail: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("Detail", "detail"),
        serialization_alias="Detail",
    )
    code: Optional[str] = None
    element: Optional[str] = None


class FaultDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    errors: List[FaultErrorItem] = Field(
        min_length=1,
        validation_alias=AliasChoices("Error", "error"),
        serialization_alias="Error",
    )
    type: Optional[str] = None


class Failure(BaseModel):
    """Outermost fault envelope returned by the service."""

    model_config = ConfigDict(populate_by_name=True)

    fault: FaultDetail = Field(
        validation_alias=AliasChoices("Fault", "fault"),
        serialization_alias="Fault",
    )
    time: Optional[str] = None

    @classmethod
    def from_body(cls, body: Union[bytes, str]) -> Optional["Failure"]:
        """Parse a fault envelope, returning None when the body is not one."""
        try:
            return cls.model_validate_json(body)
        except ValidationError:
            return None


# =============================================================================
# Success Envelopes
# =============================================================================


class Envelope(BaseModel):
    """Common outer wrapper of success responses."""

    model_config = ConfigDict(populate_by_name=True)

    time: Optional[str] = None


class CountResponse(BaseModel):
    total_count: int = Field(
        default=0,
        validation_alias=AliasChoices("totalCount", "TotalCount"),
    )


class CountEnvelope(Envelope):
    """Result of a ``SELECT COUNT(*)`` query."""

    query_response: CountResponse = Field(alias="QueryResponse")

    @property
    def total_count(self) -> int:
        return self.query_response.total_count


class QueryResponse(BaseModel):
    """Paging metadata of a data query; the record list is added per type."""

    model_config = ConfigDict(populate_by_name=True)

    start_position: int = Field(
        default=0,
        validation_alias=AliasChoices("startPosition", "StartPosition"),
    )
    max_results: int = Field(
        default=0,
        validation_alias=AliasChoices("maxResults", "MaxResults"),
    )
    total_count: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("totalCount", "TotalCount"),
    )


@lru_cache(maxsize=None)
def record_envelope(record_type: Type[R]) -> Type[Envelope]:
    """Build the ``{<Entity>: {...}, time}`` envelope model for a record type."""
    return create_model(
        f"{record_type.__name__}Envelope",
        __base__=Envelope,
        record=(record_type, Field(alias=record_type.entity_name)),
    )


@lru_cache(maxsize=None)
def query_envelope(record_type: Type[R]) -> Type[Envelope]:
    """Build the ``{QueryResponse: {<Entity>: [...], ...}, time}`` envelope model.

    A query matching nothing comes back as an empty ``QueryResponse``
    object, so the record list defaults to empty. Some entities are keyed
    by their plural name, so both spellings are read.
    """
    entity_name = record_type.entity_name
    response = create_model(
        f"{record_type.__name__}QueryResponse",
        __base__=QueryResponse,
        records=(
            List[record_type],
            Field(
                default_factory=list,
                validation_alias=AliasChoices(entity_name, f"{entity_name}s"),
                serialization_alias=entity_name,
            ),
        ),
    )
    return create_model(
        f"{record_type.__name__}QueryEnvelope",
        __base__=Envelope,
        query_response=(response, Field(alias="QueryResponse")),
    )
