# tests/api/test_shipping_calculate_api.py
from __future__ import annotations

from app.metrics.shipping import calc_count
from tests.factories import make_rate, make_warehouse, make_zone

URL = "/shipping/calculate"


def _seed_simple(db):
    wh = make_warehouse(db, is_default=True)
    zone = make_zone(db, wh, "Toàn quốc")
    make_rate(db, zone, min_distance=0, max_distance=10, base_rate=20000)
    make_rate(db, zone, min_distance=10, max_distance=None, base_rate=20000, per_km_rate=1000, min_order_amount=500000)
    db.commit()
    return wh


def test_missing_province_is_400(client):
    before = calc_count("invalid")

    r = client.post(URL, json={"order_amount": 100000})
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Destination province is required"}

    r = client.post(URL, json={"destination_province_id": 0})
    assert r.status_code == 400

    assert calc_count("invalid") == before + 2


def test_malformed_body_is_400_in_envelope(client):
    r = client.post(URL, json={"destination_province_id": "abc"})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert "destination_province_id" in body["message"]

    r = client.post(URL, json={"destination_province_id": 1, "order_amount": -5})
    assert r.status_code == 400


def test_no_warehouse_is_404(client):
    before = calc_count("not_found")

    r = client.post(URL, json={"destination_province_id": 1})
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "No active warehouse found"}
    assert calc_count("not_found") == before + 1


def test_fallback_payload_omits_rate_fields(client, db):
    wh = make_warehouse(db, is_default=True)
    make_zone(db, wh, province_ids=[1])
    db.commit()
    before = calc_count("fallback")

    r = client.post(URL, json={"destination_province_id": 79, "order_amount": 600000})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"] == {
        "shipping_fee": 30000,
        "distance": 0.0,
        "zone_name": "other region",
        "warehouse_name": wh.name,
        "is_free_shipping": True,
    }
    assert calc_count("fallback") == before + 1


def test_full_quote_payload(client, db):
    wh = _seed_simple(db)
    before = calc_count("ok")

    r = client.post(URL, json={"destination_province_id": 1, "destination_district_id": 5})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["shipping_fee"] == 20000
    assert data["distance"] == 0.0
    assert data["zone_name"] == "Toàn quốc"
    assert data["warehouse_name"] == wh.name
    assert data["warehouse_address"] == wh.address
    assert data["is_free_shipping"] is False
    assert data["free_shipping_threshold"] == 0
    assert data["rate_details"] == {
        "base_rate": 20000,
        "per_km_rate": 0,
        "min_distance": 0,
        "max_distance": 10,
    }
    assert calc_count("ok") == before + 1


def test_far_band_and_free_shipping(client, db):
    _seed_simple(db)

    # 河内 -> 海防 约 90km，落在 [10, ∞) 段
    r = client.post(URL, json={"destination_province_id": 31})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["rate_details"]["min_distance"] == 10
    assert data["rate_details"]["max_distance"] is None
    assert data["shipping_fee"] > 20000
    assert data["free_shipping_threshold"] == 500000

    before = calc_count("free")
    r = client.post(URL, json={"destination_province_id": 31, "order_amount": 500000})
    data = r.json()["data"]
    assert data["shipping_fee"] == 0
    assert data["is_free_shipping"] is True
    assert calc_count("free") == before + 1


def test_no_rate_for_distance_is_404(client, db):
    wh = make_warehouse(db, is_default=True)
    zone = make_zone(db, wh)
    make_rate(db, zone, min_distance=0, max_distance=10, base_rate=20000)
    db.commit()

    r = client.post(URL, json={"destination_province_id": 79})
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "No shipping rate found for this distance"}


def test_unexpected_error_is_500(client, monkeypatch):
    import app.api.routers.shipping_calc_routes as routes

    def _boom(*_a, **_kw):
        raise RuntimeError("db down")

    monkeypatch.setattr(routes, "calc_shipping", _boom)
    before = calc_count("error")

    r = client.post(URL, json={"destination_province_id": 1})
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Failed to calculate shipping"}
    assert calc_count("error") == before + 1
