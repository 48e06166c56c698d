from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Tuple

from procurement.core.config import ForecastSettings
from procurement.core.forecasting.domain import Recommendation


INSUFFICIENT_HISTORY_REASON = (
    "Insufficient purchase history (less than {min_purchases} purchases "
    "in the last {months} months). Order on-demand."
)


def _fixed(value: float, places: int) -> str:
    """Fixed-point text rounding halves away from zero (30.5 -> "31")."""
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def decide(
    purchase_count: int,
    average_days_between_purchases: float,
    consistency: float,
    average_lead_time_days: float,
    consumption_rate_per_month: float,
    settings: ForecastSettings | None = None,
) -> Tuple[Recommendation, str]:
    """Stock / do-not-stock decision with a human-readable reason.

    A regular purchase pattern is required to stock; on top of it, any of
    frequent purchases, long lead time or high consumption is enough. The
    reason lists every condition that held (Stock) or failed (Do Not Stock).
    """
    s = settings or ForecastSettings()

    if purchase_count < s.min_purchases:
        return Recommendation.DO_NOT_STOCK, INSUFFICIENT_HISTORY_REASON.format(
            min_purchases=s.min_purchases,
            months=s.lookback_months,
        )

    consistent = consistency > s.min_consistency
    frequent = average_days_between_purchases < s.frequent_interval_days
    long_lead_time = average_lead_time_days > s.long_lead_time_days
    high_consumption = consumption_rate_per_month > s.high_consumption_per_month

    interval_text = f"{_fixed(average_days_between_purchases, 0)} days"
    lead_time_text = f"{_fixed(average_lead_time_days, 0)} days"
    rate_text = f"{_fixed(consumption_rate_per_month, 1)} units/month"

    clauses: List[str] = []
    if consistent and (frequent or long_lead_time or high_consumption):
        clauses.append("Purchase pattern is consistent")
        if frequent:
            clauses.append(f"Frequent purchases (every {interval_text})")
        if long_lead_time:
            clauses.append(f"Long lead time ({lead_time_text})")
        if high_consumption:
            clauses.append(f"High consumption rate ({rate_text})")
        return Recommendation.STOCK, "Recommended to stock because: " + ", ".join(clauses) + "."

    if not consistent:
        clauses.append("Purchase pattern is inconsistent")
    if not frequent:
        clauses.append(f"Infrequent purchases (every {interval_text})")
    if not long_lead_time:
        clauses.append(f"Short lead time ({lead_time_text})")
    if not high_consumption:
        clauses.append(f"Low consumption rate ({rate_text})")
    return (
        Recommendation.DO_NOT_STOCK,
        "Recommended not to stock because: " + ", ".join(clauses) + ". Order on-demand.",
    )
