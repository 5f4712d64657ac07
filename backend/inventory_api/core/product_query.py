"""Product Query: pure parsing of raw listing parameters into a ProductFilter.

Invariants:
    - page within [1, MAX_PAGE]; page_size within [MIN_PAGE_SIZE, MAX_PAGE_SIZE]
    - Missing, non-integer or zero page/limit fall back to the defaults
    - Price bounds are kept only when they parse as finite numbers
    - Category is compared in normalized (stripped, lower-case) form
    - Never raises: malformed query values degrade to "no filter"

Design Decisions:
    - Query params arrive as raw strings so lenient parsing lives here, not in
      FastAPI's Query validation (a bad ?limit=abc means default, not 400)
"""

import math
from dataclasses import dataclass

from inventory_api.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE, MIN_PAGE_SIZE, MAX_PAGE_SIZE,
)


@dataclass(frozen=True)
class ProductFilter:
    """Normalized product listing request."""
    store_id: str | None = None
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    low_stock: bool = False
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def normalize_category(value: str) -> str:
    return value.strip().lower()


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_page(raw: str | None) -> int:
    value = _parse_int(raw)
    if not value:
        return DEFAULT_PAGE
    return min(MAX_PAGE, max(DEFAULT_PAGE, value))


def parse_page_size(raw: str | None) -> int:
    value = _parse_int(raw)
    if not value:
        return DEFAULT_PAGE_SIZE
    return min(MAX_PAGE_SIZE, max(MIN_PAGE_SIZE, value))


def parse_price_bound(raw: str | None) -> float | None:
    """Parse a price bound; None unless the value is a finite number."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_flag(raw: str | None) -> bool:
    return raw is not None and raw.strip().lower() == "true"


def build_product_filter(
    store_id: str | None = None,
    category: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
    low_stock: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> ProductFilter:
    """Build a ProductFilter from raw query-string values. Pure, no IO."""
    normalized_category = normalize_category(category) if category else None
    return ProductFilter(
        store_id=store_id or None,
        category=normalized_category or None,
        min_price=parse_price_bound(min_price),
        max_price=parse_price_bound(max_price),
        low_stock=parse_flag(low_stock),
        page=parse_page(page),
        page_size=parse_page_size(limit),
    )
