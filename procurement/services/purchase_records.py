from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from procurement.core.forecasting.domain import PurchaseRecord
from procurement.models.models import PurchaseOrder, Quotation


def get_all_purchase_records(db: Session) -> list[PurchaseRecord]:
    """Flatten every purchase order line into a PurchaseRecord snapshot.

    Orders are read in insertion order; lines without an item code are kept
    with an empty code and never match a material.
    """
    orders = (
        db.query(PurchaseOrder)
        .options(selectinload(PurchaseOrder.items))
        .order_by(PurchaseOrder.id)
        .all()
    )

    records: list[PurchaseRecord] = []
    for po in orders:
        for item in po.items:
            records.append(
                PurchaseRecord(
                    material_code=item.item_code or "",
                    material_name=item.item_name,
                    order_date=po.po_date,
                    expiry_date=po.expiry_date,
                    quantity=float(item.quantity),
                    unit=item.unit,
                    source_reference=po.po_number,
                )
            )
    return records


def get_all_quotation_numbers(db: Session) -> list[str]:
    rows = db.query(Quotation.quotation_number).order_by(Quotation.id).all()
    return [row.quotation_number for row in rows]
