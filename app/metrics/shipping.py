# app/metrics/shipping.py
from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter

_registry: CollectorRegistry = REGISTRY

# result: ok / free / fallback / invalid / not_found / error
_SHIPPING_CALC_TOTAL = Counter(
    "hacom_shipping_calc_total",
    "Total shipping fee calculations by result",
    ["result"],
    registry=_registry,
)

RESULTS = ("ok", "free", "fallback", "invalid", "not_found", "error")


def record_calc(result: str) -> None:
    """
    每次 /shipping/calculate 结束时调用一次（成功或失败）。
    """
    if result not in RESULTS:
        result = "error"
    _SHIPPING_CALC_TOTAL.labels(result=result).inc()


def calc_count(result: str) -> float:
    """当前进程内某个 result 的累计值（测试 / 诊断用）。"""
    v = _registry.get_sample_value("hacom_shipping_calc_total", {"result": result})
    return float(v or 0.0)
