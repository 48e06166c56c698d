from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class NextQuotationNumber(BaseModel):
    issue_date: date
    quotation_number: str
