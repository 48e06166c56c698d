from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from procurement.core.config import ForecastSettings
from procurement.core.forecasting.aggregator import aggregate
from procurement.core.forecasting.decision import decide
from procurement.core.forecasting.domain import ForecastTrace, MaterialForecast, PurchaseRecord
from procurement.core.forecasting.matcher import codes_match, match, normalize_code


def _first_matching_name(records: Iterable[PurchaseRecord], material_code: str) -> str | None:
    search_code = normalize_code(material_code)
    for record in records:
        if codes_match(search_code, normalize_code(record.material_code)):
            return record.material_name
    return None


def analyze_material(
    records: Iterable[PurchaseRecord],
    material_code: str,
    now: date | None = None,
    settings: ForecastSettings | None = None,
    trace: Optional[ForecastTrace] = None,
) -> MaterialForecast | None:
    """Forecast next order and stocking recommendation for one material.

    `records` must be a consistent snapshot of the record store. Returns None
    when no purchase of the material is found.
    """
    if not material_code or not material_code.strip():
        raise ValueError("material_code must not be blank")

    settings = settings or ForecastSettings()
    now = now or date.today()
    records = list(records)

    events = match(records, material_code, now, settings=settings, trace=trace)
    if not events:
        if trace is not None:
            trace("no_purchases_found", material_code=material_code, records_scanned=len(records))
        return None

    stats = aggregate(events, settings=settings, trace=trace)
    recommendation, reason = decide(
        purchase_count=stats.purchase_count,
        average_days_between_purchases=stats.average_days_between_purchases,
        consistency=stats.purchase_frequency_consistency,
        average_lead_time_days=stats.average_lead_time_days,
        consumption_rate_per_month=stats.consumption_rate_per_month,
        settings=settings,
    )

    material_name = _first_matching_name(records, material_code)
    if not material_name or not material_name.strip():
        material_name = material_code

    return MaterialForecast(
        material_code=material_code,
        material_name=material_name,
        average_lead_time_days=stats.average_lead_time_days,
        consumption_rate_per_month=stats.consumption_rate_per_month,
        predicted_next_order_date=stats.predicted_next_order_date,
        recommendation=recommendation,
        recommendation_reason=reason,
        purchase_history=tuple(events),
        total_quantity_window=stats.total_quantity,
        purchase_count_window=stats.purchase_count,
        average_days_between_purchases=stats.average_days_between_purchases,
        purchase_frequency_consistency=stats.purchase_frequency_consistency,
    )


def list_material_codes(records: Iterable[PurchaseRecord]) -> List[str]:
    """Distinct trimmed material codes found in the records, sorted."""
    codes = {r.material_code.strip() for r in records if r.material_code and r.material_code.strip()}
    return sorted(codes)
