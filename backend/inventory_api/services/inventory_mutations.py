"""Inventory Mutations: create, partial update and delete for stores and products.

Invariants:
    - Input reaching this module is already schema-validated (names stripped,
      category normalized, price/quantity in range)
    - A storeId that names no store is rejected before anything is written
    - Updates touch only the fields the client supplied
    - Deleting a store deletes its products in the same transaction
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory_api.core.errors import InputValidationError, ResourceNotFoundError
from inventory_api.models.product import Product
from inventory_api.models.store import Store
from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.schemas.store import StoreCreate, StoreUpdate
from inventory_api.services.inventory_queries import get_product

logger = logging.getLogger(__name__)


async def _store_or_404(db: AsyncSession, store_id: str, *, with_products: bool = False) -> Store:
    query = select(Store).where(Store.id == store_id)
    if with_products:
        query = query.options(selectinload(Store.products))
    store = (await db.execute(query)).scalar_one_or_none()
    if store is None:
        raise ResourceNotFoundError("Store", store_id)
    return store


async def _ensure_store_exists(db: AsyncSession, store_id: str) -> None:
    found = await db.scalar(select(Store.id).where(Store.id == store_id))
    if found is None:
        raise InputValidationError.for_field("storeId", "Store not found")


# ─── Stores ──────────────────────────────────────────────────────

async def create_store(db: AsyncSession, body: StoreCreate) -> Store:
    store = Store(name=body.name)
    db.add(store)
    await db.commit()
    await db.refresh(store)
    logger.info("Store created", extra={"store_id": store.id})
    return store


async def update_store(
    db: AsyncSession, store_id: str, body: StoreUpdate,
) -> Store:
    store = await _store_or_404(db, store_id)
    if body.name is not None:
        store.name = body.name
    await db.commit()
    await db.refresh(store)
    logger.info("Store updated", extra={"store_id": store_id})
    return store


async def delete_store(db: AsyncSession, store_id: str) -> None:
    """Delete a store and, through the products cascade, everything it stocks."""
    store = await _store_or_404(db, store_id, with_products=True)
    removed = len(store.products)
    await db.delete(store)
    await db.commit()
    logger.info(
        f"Store deleted with {removed} product(s)", extra={"store_id": store_id},
    )


# ─── Products ────────────────────────────────────────────────────

async def create_product(db: AsyncSession, body: ProductCreate) -> Product:
    await _ensure_store_exists(db, body.store_id)
    product = Product(
        store_id=body.store_id,
        name=body.name,
        category=body.category,
        price=body.price,
        quantity_in_stock=body.quantity_in_stock,
    )
    db.add(product)
    await db.commit()
    logger.info(
        "Product created",
        extra={"product_id": product.id, "store_id": product.store_id},
    )
    return await get_product(db, product.id)


async def update_product(
    db: AsyncSession, product_id: str, body: ProductUpdate,
) -> Product:
    product = await get_product(db, product_id)
    changes = body.changes()
    if "store_id" in changes and changes["store_id"] != product.store_id:
        await _ensure_store_exists(db, changes["store_id"])
    for field, value in changes.items():
        setattr(product, field, value)
    await db.commit()
    logger.info(
        f"Product updated ({', '.join(sorted(changes)) or 'no changes'})",
        extra={"product_id": product_id},
    )
    return await get_product(db, product_id)


async def delete_product(db: AsyncSession, product_id: str) -> None:
    product = await get_product(db, product_id)
    await db.delete(product)
    await db.commit()
    logger.info("Product deleted", extra={"product_id": product_id})
