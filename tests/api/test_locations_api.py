# tests/api/test_locations_api.py
from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_list_all_provinces():
    r = client.get("/locations/provinces")
    assert r.status_code == 200
    rows = r.json()["data"]
    assert len(rows) == 63
    assert {"code": 1, "name": "Hà Nội", "full_name": "Thành phố Hà Nội"} in rows


def test_filter_is_accent_insensitive():
    rows = client.get("/locations/provinces", params={"q": "ha noi"}).json()["data"]
    assert [p["code"] for p in rows] == [1]

    rows = client.get("/locations/provinces", params={"q": "Đà Nẵng"}).json()["data"]
    assert [p["code"] for p in rows] == [48]


def test_province_detail_and_404():
    r = client.get("/locations/provinces/79")
    assert r.status_code == 200
    p = r.json()["data"]
    assert p["name"] == "Hồ Chí Minh"
    assert p["latitude"] == 10.8231
    assert p["longitude"] == 106.6297

    r = client.get("/locations/provinces/3")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Province not found"}
