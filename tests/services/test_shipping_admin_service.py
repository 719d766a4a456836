# tests/services/test_shipping_admin_service.py
from __future__ import annotations

import pytest

from app.api.errors import NotFoundError, ValidationError
from app.services.shipping_admin_service import ShippingAdminService
from tests.factories import make_warehouse, make_zone


def test_create_default_warehouse_clears_previous_default(db):
    svc = ShippingAdminService(db)
    a = svc.create_warehouse(name="Kho A", address="Hà Nội", latitude=21.0, longitude=105.8, is_default=True)
    b = svc.create_warehouse(name="Kho B", address="TP.HCM", is_default=True)

    rows = {w["id"]: w for w in svc.list_warehouses()}
    assert rows[a["id"]]["is_default"] is False
    assert rows[b["id"]]["is_default"] is True
    assert svc.list_warehouses()[0]["id"] == b["id"]


def test_create_warehouse_requires_coordinate_pair(db):
    with pytest.raises(ValidationError):
        ShippingAdminService(db).create_warehouse(name="Kho", address="x", latitude=21.0)


def test_create_zone_unknown_warehouse(db):
    with pytest.raises(NotFoundError) as ei:
        ShippingAdminService(db).create_zone(name="Z", warehouse_id=999)
    assert ei.value.message == "Warehouse not found"


def test_zone_lists_decoded_and_malformed_shown_empty(db):
    wh = make_warehouse(db)
    make_zone(db, wh, "Hỏng", raw_province_ids="oops")
    db.commit()

    svc = ShippingAdminService(db)
    created = svc.create_zone(name="Miền Bắc", warehouse_id=wh.id, province_ids=[1, 2], district_ids=[5])
    assert created["province_ids"] == [1, 2]
    assert created["district_ids"] == [5]
    assert created["warehouse_name"] == wh.name

    by_name = {z["name"]: z for z in svc.list_zones()}
    assert by_name["Hỏng"]["province_ids"] == []
    assert by_name["Miền Bắc"]["warehouse_address"] == wh.address


def test_create_rate_validation(db):
    wh = make_warehouse(db)
    zone = make_zone(db, wh)
    db.commit()

    svc = ShippingAdminService(db)
    with pytest.raises(NotFoundError):
        svc.create_rate(zone_id=999, base_rate=1000)
    with pytest.raises(ValidationError):
        svc.create_rate(zone_id=zone.id, base_rate=1000, min_distance=50, max_distance=10)


def test_list_rates_ordered_and_filtered(db):
    wh = make_warehouse(db)
    z1 = make_zone(db, wh, "Z1")
    z2 = make_zone(db, wh, "Z2")
    db.commit()

    svc = ShippingAdminService(db)
    svc.create_rate(zone_id=z1.id, base_rate=50000, min_distance=50, max_distance=200)
    svc.create_rate(zone_id=z1.id, base_rate=30000, min_distance=0, max_distance=50)
    svc.create_rate(zone_id=z2.id, base_rate=10000)

    rows = svc.list_rates(zone_id=z1.id)
    assert [r["min_distance"] for r in rows] == [0.0, 50.0]
    assert all(r["zone_name"] == "Z1" and r["warehouse_name"] == wh.name for r in rows)
    assert len(svc.list_rates()) == 3
