from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from procurement.core.numbering import next_quotation_number
from procurement.schemas.quotation import NextQuotationNumber
from procurement.services.purchase_records import get_all_quotation_numbers


logger = logging.getLogger(__name__)


def generate_next_quotation_number(db: Session, today: date | None = None) -> NextQuotationNumber:
    today = today or date.today()
    number = next_quotation_number(get_all_quotation_numbers(db), today)
    logger.info("Next quotation number for %s is %s", today.isoformat(), number)
    return NextQuotationNumber(issue_date=today, quotation_number=number)
