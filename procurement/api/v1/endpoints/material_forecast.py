from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from procurement.core.db import get_db
from procurement.schemas.material_forecast import MaterialCodeList, MaterialForecastRead
from procurement.services.material_forecast import build_material_code_list, build_material_forecast


router = APIRouter()


@router.get("/codes", response_model=MaterialCodeList)
def list_codes(db: Session = Depends(get_db)):
    return build_material_code_list(db)


@router.get("", response_model=MaterialForecastRead)
def get_material_forecast(
    material_code: str = Query(...),
    as_of: date | None = None,
    db: Session = Depends(get_db),
):
    return build_material_forecast(db=db, material_code=material_code, as_of=as_of)
