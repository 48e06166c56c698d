from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from procurement.core.forecasting.domain import Recommendation


class PurchaseEventRead(BaseModel):
    purchase_date: date
    quantity: float
    unit: str
    source_reference: str
    lead_time_days: int

    model_config = ConfigDict(from_attributes=True)


class MaterialForecastRead(BaseModel):
    material_code: str
    material_name: str
    average_lead_time_days: float
    consumption_rate_per_month: float
    predicted_next_order_date: date | None = None
    recommendation: Recommendation
    recommendation_reason: str
    purchase_history: list[PurchaseEventRead]
    total_quantity_window: float
    purchase_count_window: int
    average_days_between_purchases: float
    purchase_frequency_consistency: float

    model_config = ConfigDict(from_attributes=True)


class MaterialCodeList(BaseModel):
    codes: list[str]
