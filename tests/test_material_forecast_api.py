from __future__ import annotations

from datetime import date

from tests.test_utils import create_purchase_order


def _seed_orders(db_session):
    create_purchase_order(
        db_session,
        po_number="PO-api-3",
        po_date=date(2024, 3, 3),
        items=[{"item_name": "V-belt A42", "item_code": "1069685", "quantity": 3}],
    )
    create_purchase_order(
        db_session,
        po_number="PO-api-1",
        po_date=date(2024, 1, 1),
        items=[
            {"item_name": "V-belt A42", "item_code": "1069685", "quantity": 3},
            {"item_name": "Bearing", "item_code": "B-6204", "quantity": 4},
        ],
    )
    create_purchase_order(
        db_session,
        po_number="PO-api-2",
        po_date=date(2024, 2, 1),
        items=[{"item_name": "V-belt A42", "item_code": "1069685", "quantity": 3}],
    )


def test_root_health(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_get_material_forecast(client, db_session):
    _seed_orders(db_session)

    resp = client.get(
        "/api/v1/material-forecast",
        params={"material_code": "1069685", "as_of": "2024-03-15"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()

    assert body["recommendation"] == "Stock"
    assert body["purchase_count_window"] == 3
    assert body["total_quantity_window"] == 9.0
    assert body["predicted_next_order_date"] == "2024-04-03"
    assert [e["purchase_date"] for e in body["purchase_history"]] == [
        "2024-01-01",
        "2024-02-01",
        "2024-03-03",
    ]
    assert [e["source_reference"] for e in body["purchase_history"]] == ["PO-api-1", "PO-api-2", "PO-api-3"]
    assert all(e["lead_time_days"] == 30 for e in body["purchase_history"])


def test_get_material_forecast_insufficient_history(client, db_session):
    _seed_orders(db_session)

    resp = client.get(
        "/api/v1/material-forecast",
        params={"material_code": "b-6204", "as_of": "2024-03-15"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["recommendation"] == "Do Not Stock"
    assert body["material_name"] == "Bearing"
    assert body["predicted_next_order_date"] is None


def test_unknown_material_returns_404(client, db_session):
    _seed_orders(db_session)

    resp = client.get("/api/v1/material-forecast", params={"material_code": "UNKNOWN"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No procurement data found for material code: UNKNOWN"


def test_blank_material_code_returns_400(client):
    resp = client.get("/api/v1/material-forecast", params={"material_code": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please enter a material code"


def test_list_material_codes(client, db_session):
    _seed_orders(db_session)

    resp = client.get("/api/v1/material-forecast/codes")
    assert resp.status_code == 200
    assert resp.json() == {"codes": ["1069685", "B-6204"]}
