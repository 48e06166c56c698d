from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from procurement.core.config import get_settings
from procurement.core.forecasting.service import analyze_material, list_material_codes
from procurement.schemas.material_forecast import MaterialCodeList, MaterialForecastRead
from procurement.services.purchase_records import get_all_purchase_records


logger = logging.getLogger(__name__)


def _log_trace(event: str, **fields: Any) -> None:
    logger.debug("material forecast %s: %s", event, fields)


def build_material_forecast(
    db: Session,
    material_code: str,
    as_of: date | None = None,
) -> MaterialForecastRead:
    """Analyze one material over a single snapshot of the purchase records."""
    code = (material_code or "").strip()
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a material code",
        )

    records = get_all_purchase_records(db)
    logger.info("Analyzing material %r over %d purchase records", code, len(records))

    forecast = analyze_material(
        records,
        code,
        now=as_of,
        settings=get_settings().forecast,
        trace=_log_trace if logger.isEnabledFor(logging.DEBUG) else None,
    )
    if forecast is None:
        logger.info("No procurement data found for material %r", code)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No procurement data found for material code: {code}",
        )

    return MaterialForecastRead.model_validate(forecast)


def build_material_code_list(db: Session) -> MaterialCodeList:
    return MaterialCodeList(codes=list_material_codes(get_all_purchase_records(db)))
