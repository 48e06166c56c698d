from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Optional, Sequence

from procurement.core.config import ForecastSettings
from procurement.core.forecasting.domain import ForecastStatistics, ForecastTrace, PurchaseEvent


def months_between(start: date, end: date) -> float:
    """Fractional months from `start` to `end`, counting 30 days per month."""
    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day
    return years * 12 + months + days / 30.0


def purchase_intervals(events: Sequence[PurchaseEvent]) -> List[int]:
    """Positive day gaps between consecutive events; same-day repeats are dropped."""
    intervals: List[int] = []
    for previous, current in zip(events, events[1:]):
        gap = (current.purchase_date - previous.purchase_date).days
        if gap > 0:
            intervals.append(gap)
    return intervals


def consistency_score(intervals: Sequence[int]) -> float:
    """Regularity of purchase intervals in [0, 1].

    Derived from the coefficient of variation: 1 - cv / 2, clamped. Without
    intervals there is no variability to penalize, so the score is 1.0.
    """
    if not intervals:
        return 1.0
    mean = sum(intervals) / len(intervals)
    if mean <= 0:
        return 1.0
    variance = sum((i - mean) ** 2 for i in intervals) / len(intervals)
    cv = math.sqrt(variance) / mean
    return min(1.0, max(0.0, 1.0 - cv / 2.0))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def aggregate(
    events: Sequence[PurchaseEvent],
    settings: ForecastSettings | None = None,
    trace: Optional[ForecastTrace] = None,
) -> ForecastStatistics:
    """Compute consumption statistics over date-ordered purchase events."""
    if not events:
        raise ValueError("aggregate() requires at least one purchase event")

    settings = settings or ForecastSettings()

    total_quantity = float(sum(e.quantity for e in events))
    purchase_count = len(events)

    lead_times = [e.lead_time_days for e in events if e.lead_time_days > 0]
    if lead_times:
        average_lead_time_days = sum(lead_times) / len(lead_times)
    else:
        average_lead_time_days = settings.default_lead_time_days

    intervals = purchase_intervals(events)
    average_days_between_purchases = sum(intervals) / len(intervals) if intervals else 0.0

    months_of_data = months_between(events[0].purchase_date, events[-1].purchase_date)
    if months_of_data > 0:
        consumption_rate_per_month = total_quantity / months_of_data
    else:
        consumption_rate_per_month = total_quantity / settings.default_months_of_data

    consistency = consistency_score(intervals)

    predicted_next_order_date: date | None = None
    if average_days_between_purchases > 0:
        predicted_next_order_date = events[-1].purchase_date + timedelta(
            days=_round_half_up(average_days_between_purchases)
        )

    if trace is not None:
        trace(
            "statistics_aggregated",
            purchase_count=purchase_count,
            usable_lead_times=len(lead_times),
            intervals=intervals,
            months_of_data=months_of_data,
            consistency=consistency,
        )

    return ForecastStatistics(
        total_quantity=total_quantity,
        purchase_count=purchase_count,
        average_lead_time_days=average_lead_time_days,
        average_days_between_purchases=average_days_between_purchases,
        months_of_data=months_of_data,
        consumption_rate_per_month=consumption_rate_per_month,
        purchase_frequency_consistency=consistency,
        predicted_next_order_date=predicted_next_order_date,
    )
