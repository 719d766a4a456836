# app/api/routers/locations.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel

from app.api.errors import NotFoundError
from app.geo.vn_registry import get_province, list_provinces

router = APIRouter(prefix="/locations", tags=["locations"])


class ProvinceOut(BaseModel):
    code: int
    name: str
    full_name: str


class ProvinceDetailOut(ProvinceOut):
    latitude: float
    longitude: float


class ProvinceListOut(BaseModel):
    success: bool = True
    data: List[ProvinceOut]


class ProvinceDetailEnvelope(BaseModel):
    success: bool = True
    data: ProvinceDetailOut


@router.get("/provinces", response_model=ProvinceListOut)
def locations_list_provinces(q: str | None = Query(default=None)) -> ProvinceListOut:
    return ProvinceListOut(
        data=[ProvinceOut(code=p.code, name=p.name, full_name=p.full_name) for p in list_provinces(q=q)]
    )


@router.get("/provinces/{province_code}", response_model=ProvinceDetailEnvelope)
def locations_get_province(province_code: int = Path(..., ge=1)) -> ProvinceDetailEnvelope:
    p = get_province(province_code)
    if p is None:
        raise NotFoundError("Province not found")
    return ProvinceDetailEnvelope(
        data=ProvinceDetailOut(
            code=p.code,
            name=p.name,
            full_name=p.full_name,
            latitude=p.latitude,
            longitude=p.longitude,
        )
    )
