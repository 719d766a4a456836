# app/models/__init__.py
"""
统一导出 ORM 模型。
"""

from importlib import import_module


def _export(module_name: str, class_name: str) -> None:
    module = import_module(module_name)
    globals()[class_name] = getattr(module, class_name)


MODEL_SPECS = [
    ("app.models.warehouse", "Warehouse"),
    ("app.models.shipping_zone", "ShippingZone"),
    ("app.models.shipping_rate", "ShippingRate"),
]

for _mod, _cls in MODEL_SPECS:
    _export(_mod, _cls)

__all__ = [
    "Warehouse",
    "ShippingZone",
    "ShippingRate",
]
