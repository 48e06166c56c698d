from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional, Protocol, Tuple


class Recommendation(str, Enum):
    STOCK = "Stock"
    DO_NOT_STOCK = "Do Not Stock"


class ForecastTrace(Protocol):
    """Optional observer for the forecast pipeline.

    Called with an event name and keyword fields; it must not influence the
    computation. The service layer plugs in a logging-backed implementation.
    """

    def __call__(self, event: str, **fields: Any) -> None:
        ...


@dataclass(frozen=True)
class PurchaseRecord:
    """A purchased line as supplied by the record store.

    Codes are free text and are not guaranteed to be normalized.
    """

    material_code: str
    material_name: str
    order_date: date
    expiry_date: date
    """Commitment/validity horizon of the order; lead time ends here."""

    quantity: float
    unit: str
    source_reference: str = ""
    """Identifier of the originating document, e.g. the PO number."""


@dataclass(frozen=True)
class PurchaseEvent:
    """A matched purchase of the analysed material."""

    purchase_date: date
    quantity: float
    unit: str
    source_reference: str
    lead_time_days: int


@dataclass(frozen=True)
class ForecastStatistics:
    """Aggregated figures over the matched purchase events."""

    total_quantity: float
    purchase_count: int
    average_lead_time_days: float
    average_days_between_purchases: float
    months_of_data: float
    consumption_rate_per_month: float
    purchase_frequency_consistency: float
    """0..1 score, 1.0 being perfectly regular purchase intervals."""

    predicted_next_order_date: Optional[date]


@dataclass(frozen=True)
class MaterialForecast:
    material_code: str
    material_name: str
    average_lead_time_days: float
    consumption_rate_per_month: float
    predicted_next_order_date: Optional[date]
    recommendation: Recommendation
    recommendation_reason: str
    purchase_history: Tuple[PurchaseEvent, ...]
    """Matched purchases, ascending by purchase date."""

    total_quantity_window: float
    purchase_count_window: int
    average_days_between_purchases: float
    purchase_frequency_consistency: float
