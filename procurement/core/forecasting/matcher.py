from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional

from procurement.core.config import ForecastSettings
from procurement.core.forecasting.domain import ForecastTrace, PurchaseEvent, PurchaseRecord


def normalize_code(code: str | None) -> str:
    return (code or "").strip().lower()


def codes_match(search_code: str, record_code: str) -> bool:
    """Loose code comparison on already-normalized codes.

    Codes typed into POs often carry prefixes, suffixes or stray spaces, so
    containment in either direction counts as a match.
    """
    if not search_code or not record_code:
        return False
    return (
        record_code == search_code
        or search_code in record_code
        or record_code in search_code
    )


def window_start(now: date, months: int = 12) -> date:
    """Same calendar day `months` back.

    A day past the end of the target month rolls over into the next month,
    so 29 February looks back to 1 March of the previous year.
    """
    total = now.year * 12 + (now.month - 1) - months
    year, month = divmod(total, 12)
    return date(year, month + 1, 1) + timedelta(days=now.day - 1)


def match(
    records: Iterable[PurchaseRecord],
    material_code: str,
    now: date,
    settings: ForecastSettings | None = None,
    trace: Optional[ForecastTrace] = None,
) -> List[PurchaseEvent]:
    """Collect purchase events of one material inside the lookback window.

    Records are visited in the given order. Matching records older than the
    window are still kept while fewer than `min_history_events` events have
    been accepted, so sparse histories keep a minimal trend.
    """
    settings = settings or ForecastSettings()
    search_code = normalize_code(material_code)
    cutoff = window_start(now, settings.lookback_months) - timedelta(
        days=settings.window_tolerance_days
    )

    events: List[PurchaseEvent] = []
    for record in records:
        record_code = normalize_code(record.material_code)
        if not codes_match(search_code, record_code):
            continue

        within_window = record.order_date >= cutoff
        if not within_window and len(events) >= settings.min_history_events:
            if trace is not None:
                trace(
                    "record_outside_window",
                    source_reference=record.source_reference,
                    order_date=record.order_date,
                    cutoff=cutoff,
                )
            continue

        lead_time_days = (record.expiry_date - record.order_date).days
        events.append(
            PurchaseEvent(
                purchase_date=record.order_date,
                quantity=record.quantity,
                unit=record.unit,
                source_reference=record.source_reference,
                lead_time_days=lead_time_days,
            )
        )
        if trace is not None:
            trace(
                "record_matched",
                source_reference=record.source_reference,
                record_code=record.material_code,
                exact=record_code == search_code,
                within_window=within_window,
                lead_time_days=lead_time_days,
            )

    events.sort(key=lambda e: e.purchase_date)
    return events
