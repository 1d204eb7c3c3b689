"""Journal entry records.

Every field is optional and enum-typed fields also accept values not listed
here, so entries the service returns in shapes this module does not model
(e.g. ``DescriptionOnly`` lines) still decode.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ledgerlink.models.base import Record, ReferenceType, WireModel


class GlobalTaxCalculation(str, Enum):
    """How tax is applied to the journal entry amounts."""
    TAX_EXCLUDED = "TaxExcluded"
    TAX_INCLUSIVE = "TaxInclusive"
    NOT_APPLICABLE = "NotApplicable"


class PostingType(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"


class TaxApplicableOn(str, Enum):
    SALES = "Sales"
    PURCHASE = "Purchase"


class LineEntityType(str, Enum):
    VENDOR = "Vendor"
    EMPLOYEE = "Employee"
    CUSTOMER = "Customer"


class LineDetailType(str, Enum):
    JOURNAL_ENTRY_LINE_DETAIL = "JournalEntryLineDetail"
    DESCRIPTION_ONLY = "DescriptionOnly"


class JournalEntryLineEntity(WireModel):
    """Name entity (customer, vendor, employee) attached to a line."""
    type: Optional[Union[LineEntityType, str]] = Field(
        default=None, alias="Type", union_mode="left_to_right"
    )
    entity_ref: Optional[ReferenceType] = Field(default=None, alias="EntityRef")


class JournalEntryLineDetail(WireModel):
    """Posting detail of a journal entry line."""
    posting_type: Optional[Union[PostingType, str]] = Field(
        default=None, alias="PostingType", union_mode="left_to_right"
    )
    account_ref: Optional[ReferenceType] = Field(default=None, alias="AccountRef")
    entity: Optional[JournalEntryLineEntity] = Field(default=None, alias="Entity")
    journal_code_ref: Optional[ReferenceType] = Field(default=None, alias="JournalCodeRef")
    tax_applicable_on: Optional[Union[TaxApplicableOn, str]] = Field(
        default=None, alias="TaxApplicableOn", union_mode="left_to_right"
    )


class JournalEntryLine(WireModel):
    """Line item for journal entry."""
    id: Optional[str] = Field(default=None, alias="Id")
    description: Optional[str] = Field(default=None, alias="Description")
    line_num: Optional[int] = Field(default=None, alias="LineNum")
    amount: Optional[float] = Field(default=None, alias="Amount")
    detail_type: Optional[Union[LineDetailType, str]] = Field(
        default=None, alias="DetailType", union_mode="left_to_right"
    )
    journal_entry_line_detail: Optional[JournalEntryLineDetail] = Field(
        default=None, alias="JournalEntryLineDetail"
    )
    project_ref: Optional[ReferenceType] = Field(default=None, alias="ProjectRef")


class JournalEntry(Record):
    """Journal entry record."""

    entity_name = "JournalEntry"
    endpoint = "journalentry"

    txn_date: Optional[date] = Field(default=None, alias="TxnDate")
    line: Optional[List[JournalEntryLine]] = Field(default_factory=list, alias="Line")
    adjustment: Optional[bool] = Field(default=None, alias="Adjustment")
    currency_ref: Optional[ReferenceType] = Field(default=None, alias="CurrencyRef")
    exchange_rate: Optional[float] = Field(default=None, alias="ExchangeRate")
    txn_tax_detail: Optional[Dict[str, Any]] = Field(default=None, alias="TxnTaxDetail")
    global_tax_calculation: Optional[Union[GlobalTaxCalculation, str]] = Field(
        default=None, alias="GlobalTaxCalculation", union_mode="left_to_right"
    )
    doc_number: Optional[str] = Field(default=None, alias="DocNumber")
    private_note: Optional[str] = Field(default=None, alias="PrivateNote")
