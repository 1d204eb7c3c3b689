"""Base record model shared by every record type."""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Pydantic model that speaks the service's PascalCase wire format.

    Fields are populated either by their Python name or by their wire alias,
    and unknown wire fields are kept so records round-trip unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready wire dict (aliases, unset fields dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ReferenceType(WireModel):
    """Reference to another record, e.g. an account or a currency."""
    value: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class ModificationMetaData(WireModel):
    """Server-maintained creation and update timestamps."""
    create_time: Optional[str] = Field(default=None, alias="CreateTime")
    last_updated_time: Optional[str] = Field(default=None, alias="LastUpdatedTime")


class Record(WireModel):
    """A persisted business record.

    Only the identifier and the version token are interpreted by the client;
    everything else is carried as-is.

    Subclasses set ``entity_name`` (the query ``FROM`` name and envelope key)
    and ``endpoint`` (the REST path segment).
    """

    entity_name: ClassVar[str] = ""
    endpoint: ClassVar[str] = ""

    id: Optional[str] = Field(default=None, alias="Id")
    sync_token: Optional[str] = Field(default=None, alias="SyncToken")
    sparse: Optional[bool] = None
    domain: Optional[str] = None
    meta_data: Optional[ModificationMetaData] = Field(default=None, alias="MetaData")

    @property
    def record_key(self) -> Optional[str]:
        """Value used to look up the current persisted copy of this record."""
        return self.id
