"""Exchange rate records.

Exchange rates carry no ``Id``; the service keys them by source currency
code and as-of date.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from ledgerlink.models.base import Record


class ExchangeRate(Record):
    """Rate between a source currency and the home currency on a date."""

    entity_name = "ExchangeRate"
    endpoint = "exchangerate"

    source_currency_code: Optional[str] = Field(default=None, alias="SourceCurrencyCode")
    target_currency_code: Optional[str] = Field(default=None, alias="TargetCurrencyCode")
    as_of_date: Optional[date] = Field(default=None, alias="AsOfDate")
    rate: Optional[float] = Field(default=None, alias="Rate")

    @property
    def record_key(self) -> Optional[str]:
        return self.source_currency_code
