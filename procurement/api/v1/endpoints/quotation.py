from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from procurement.core.db import get_db
from procurement.schemas.quotation import NextQuotationNumber
from procurement.services.quotation_number import generate_next_quotation_number


router = APIRouter()


@router.get("/next-number", response_model=NextQuotationNumber)
def get_next_quotation_number(
    today: date | None = None,
    db: Session = Depends(get_db),
):
    return generate_next_quotation_number(db=db, today=today)
