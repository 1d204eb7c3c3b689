"""Payment method records."""

from typing import Optional

from pydantic import Field

from ledgerlink.models.base import Record


class PaymentMethod(Record):
    """Payment method, e.g. cash, check or a credit card brand."""

    entity_name = "PaymentMethod"
    endpoint = "paymentmethod"

    name: Optional[str] = Field(default=None, alias="Name")
    type: Optional[str] = Field(default=None, alias="Type")
    active: Optional[bool] = Field(default=None, alias="Active")
    status: Optional[str] = None
