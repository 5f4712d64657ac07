"""Inventory Queries: product listings, categories, store detail and summaries.

Invariants:
    - list_products total counts the same predicate as the page, without offset/limit
    - Products ordered by name, then id, so pagination is deterministic
    - Store summaries come from one grouped Store LEFT OUTER JOIN Product query;
      stores without products report zeros
    - The low-stock threshold is always a bound parameter

Design Decisions:
    - Filter parsing is pure (core/product_query.py); this module only turns a
      ProductFilter into SQL
    - low_stock_threshold is a keyword argument defaulting to LOW_STOCK_THRESHOLD
      so callers and tests can vary it without touching SQL text
"""

import logging
from typing import Any

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory_api.core.domain_types import LOW_STOCK_THRESHOLD
from inventory_api.core.errors import ResourceNotFoundError
from inventory_api.core.product_query import ProductFilter
from inventory_api.core.store_summary import build_store_summary
from inventory_api.models.product import Product
from inventory_api.models.store import Store

logger = logging.getLogger(__name__)


def product_conditions(
    flt: ProductFilter, low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> list:
    """Translate a ProductFilter into SQLAlchemy WHERE clauses."""
    conditions = []
    if flt.store_id:
        conditions.append(Product.store_id == flt.store_id)
    if flt.category:
        conditions.append(Product.category == flt.category)
    if flt.min_price is not None:
        conditions.append(Product.price >= flt.min_price)
    if flt.max_price is not None:
        conditions.append(Product.price <= flt.max_price)
    if flt.low_stock:
        conditions.append(Product.quantity_in_stock < low_stock_threshold)
    return conditions


async def list_products(
    db: AsyncSession,
    flt: ProductFilter,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> tuple[list[Product], int]:
    """Return one page of matching products (store loaded) and the total match count."""
    conditions = product_conditions(flt, low_stock_threshold)

    page_query = (
        select(Product)
        .options(selectinload(Product.store))
        .where(*conditions)
        .order_by(Product.name.asc(), Product.id.asc())
        .offset(flt.offset)
        .limit(flt.page_size)
    )
    count_query = select(func.count()).select_from(Product).where(*conditions)

    products = (await db.execute(page_query)).scalars().all()
    total = (await db.execute(count_query)).scalar_one()
    return list(products), total


async def list_categories(
    db: AsyncSession, store_id: str | None = None,
) -> list[str]:
    """Distinct product categories, ascending, optionally scoped to one store."""
    query = select(Product.category).distinct().order_by(Product.category.asc())
    if store_id:
        query = query.where(Product.store_id == store_id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def list_stores(db: AsyncSession) -> list[Store]:
    result = await db.execute(
        select(Store).order_by(Store.name.asc(), Store.id.asc()),
    )
    return list(result.scalars().all())


async def get_store(db: AsyncSession, store_id: str) -> Store:
    """Get a store with its products or raise ResourceNotFoundError."""
    result = await db.execute(
        select(Store)
        .options(selectinload(Store.products))
        .where(Store.id == store_id),
    )
    store = result.scalar_one_or_none()
    if store is None:
        raise ResourceNotFoundError("Store", store_id)
    return store


async def get_product(db: AsyncSession, product_id: str) -> Product:
    """Get a product with its store or raise ResourceNotFoundError."""
    result = await db.execute(
        select(Product)
        .options(selectinload(Product.store))
        .where(Product.id == product_id)
        .execution_options(populate_existing=True),
    )
    product = result.scalar_one_or_none()
    if product is None:
        raise ResourceNotFoundError("Product", product_id)
    return product


async def store_summaries(
    db: AsyncSession, low_stock_threshold: int = LOW_STOCK_THRESHOLD,
) -> list[dict[str, Any]]:
    """Per-store product count, inventory value and low-stock count."""
    low_stock = case(
        (Product.quantity_in_stock < low_stock_threshold, 1), else_=0,
    )
    query = (
        select(
            Store.id,
            Store.name,
            func.count(Product.id).label("product_count"),
            func.sum(Product.price * Product.quantity_in_stock).label("total_value"),
            func.sum(low_stock).label("low_stock_count"),
        )
        .select_from(Store)
        .outerjoin(Product, Product.store_id == Store.id)
        .group_by(Store.id, Store.name)
        .order_by(Store.name.asc(), Store.id.asc())
    )
    rows = (await db.execute(query)).all()
    return [
        build_store_summary(
            row.id, row.name, row.product_count,
            row.total_value, row.low_stock_count,
        )
        for row in rows
    ]
