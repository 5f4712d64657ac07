"""Store Summary: pure shaping of aggregation rows into the public report.

Invariants:
    - Missing aggregates (store without products) become zeros, never None
    - totalInventoryValue is rounded to 2 decimals, halves away from zero
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

_CENTS = Decimal("0.01")


def round_currency(value: float | None) -> float:
    """Round a monetary total to cents; None (empty SUM) becomes 0.0."""
    if value is None:
        return 0.0
    return float(Decimal(repr(float(value))).quantize(_CENTS, rounding=ROUND_HALF_UP))


def build_store_summary(
    store_id: str,
    store_name: str,
    product_count: int | None,
    total_value: float | None,
    low_stock_count: int | None,
) -> dict[str, Any]:
    """Build one summary entry from a grouped row. Pure, no IO."""
    return {
        "store_id": store_id,
        "store_name": store_name,
        "product_count": int(product_count or 0),
        "total_inventory_value": round_currency(total_value),
        "low_stock_count": int(low_stock_count or 0),
    }
