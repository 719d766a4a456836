# app/geo/vn_registry.py
from __future__ import annotations

import json
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# 首都（河内）编码：未知省份的坐标兜底
CAPITAL_PROVINCE_CODE = 1


@dataclass(frozen=True)
class GeoProvince:
    code: int
    name: str
    full_name: str
    latitude: float
    longitude: float


def _norm(s: Optional[str]) -> str:
    return (s or "").strip()


def _fold(s: str) -> str:
    """去声调 + 小写，便于 'ha noi' 命中 'Hà Nội'。"""
    t = unicodedata.normalize("NFD", s.replace("đ", "d").replace("Đ", "D"))
    return "".join(ch for ch in t if unicodedata.category(ch) != "Mn").lower()


def _resource_path() -> Path:
    # app/geo/vn_registry.py -> app/geo -> app
    return Path(__file__).resolve().parents[1] / "resources" / "geo" / "vn_provinces.json"


@lru_cache(maxsize=1)
def load_vn_provinces() -> Tuple[List[GeoProvince], Dict[int, GeoProvince]]:
    raw = json.loads(_resource_path().read_text(encoding="utf-8"))

    provinces: List[GeoProvince] = []
    for x in raw:
        name = _norm(x.get("name"))
        if not name or x.get("code") is None:
            continue
        provinces.append(
            GeoProvince(
                code=int(x["code"]),
                name=name,
                full_name=_norm(x.get("full_name")) or name,
                latitude=float(x["lat"]),
                longitude=float(x["lon"]),
            )
        )

    by_code = {p.code: p for p in provinces}
    return provinces, by_code


def list_provinces(q: Optional[str] = None) -> List[GeoProvince]:
    provinces, _ = load_vn_provinces()
    t = _norm(q)
    if not t:
        return provinces

    needle = _fold(t)
    return [p for p in provinces if needle in _fold(p.name) or needle in _fold(p.full_name)]


def get_province(code: int) -> Optional[GeoProvince]:
    _, by_code = load_vn_provinces()
    return by_code.get(int(code))


def province_coordinates(code: Optional[int]) -> Tuple[float, float]:
    """
    省份 -> (lat, lon)，取省会坐标。
    近似值，不是地理编码；表里没有的编码一律回退到首都坐标。
    """
    _, by_code = load_vn_provinces()
    p = by_code.get(int(code)) if code is not None else None
    if p is None:
        p = by_code[CAPITAL_PROVINCE_CODE]
    return p.latitude, p.longitude
