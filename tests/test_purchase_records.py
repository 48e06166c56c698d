from __future__ import annotations

from datetime import date

from procurement.services.purchase_records import get_all_purchase_records, get_all_quotation_numbers
from tests.test_utils import create_purchase_order, create_quotation


def test_purchase_order_lines_are_flattened(db_session):
    create_purchase_order(
        db_session,
        po_number="PO-1001",
        po_date=date(2024, 1, 10),
        expiry_date=date(2024, 2, 24),
        items=[
            {"item_name": "V-belt A42", "item_code": "1069685", "quantity": 3, "unit": "pcs"},
            {"item_name": "Loose item", "item_code": None, "quantity": 1, "unit": "lot"},
        ],
    )
    create_purchase_order(
        db_session,
        po_number="PO-1002",
        po_date=date(2024, 2, 10),
        items=[{"item_name": "Bearing 6204", "item_code": "B-6204", "quantity": 10.5, "unit": "pcs"}],
    )

    records = get_all_purchase_records(db_session)

    assert [(r.source_reference, r.material_code) for r in records] == [
        ("PO-1001", "1069685"),
        ("PO-1001", ""),
        ("PO-1002", "B-6204"),
    ]
    first = records[0]
    assert first.material_name == "V-belt A42"
    assert first.order_date == date(2024, 1, 10)
    assert first.expiry_date == date(2024, 2, 24)
    assert first.quantity == 3.0
    assert records[2].quantity == 10.5


def test_empty_store(db_session):
    assert get_all_purchase_records(db_session) == []
    assert get_all_quotation_numbers(db_session) == []


def test_quotation_numbers_are_returned(db_session):
    create_quotation(db_session, "ALK 15-03-2024-100000", date(2024, 3, 15))
    create_quotation(db_session, "ALK 15-03-2024-100002", date(2024, 3, 15))

    assert get_all_quotation_numbers(db_session) == [
        "ALK 15-03-2024-100000",
        "ALK 15-03-2024-100002",
    ]
