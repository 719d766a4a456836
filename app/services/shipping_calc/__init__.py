# app/services/shipping_calc/__init__.py
from __future__ import annotations

from .calc import calc_shipping, select_origin_warehouse
from .types import Dest

__all__ = ["Dest", "calc_shipping", "select_origin_warehouse"]
