"""
Wipe the inventory tables and seed 3 demo stores with 5 products each.

Run locally:
  python backend/scripts/seed_demo_data.py

It uses the same DATABASE_URL / .env settings as the API.
"""

from __future__ import annotations

import asyncio
import logging
import random

from sqlalchemy import delete

from inventory_api.config import get_settings
from inventory_api.db.base import Base
from inventory_api.db.session import create_session_factory
from inventory_api.infrastructure.observability import setup_logging
from inventory_api.models.product import Product
from inventory_api.models.store import Store

logger = logging.getLogger("seed_demo_data")

STORE_NAMES: list[str] = ["Downtown Grocers", "Tech Haven", "Green Market"]
CATEGORIES: list[str] = ["electronics", "produce", "dairy", "beverages", "snacks"]
PRODUCT_NAMES: list[str] = [
    "Organic Milk",
    "Wireless Mouse",
    "Tomatoes",
    "Sparkling Water",
    "Chips",
    "Keyboard",
    "Apples",
    "Yogurt",
    "Headphones",
    "Bananas",
    "Soda",
    "USB Cable",
    "Lettuce",
    "Cheese",
]
PRODUCTS_PER_STORE = 5


def build_demo_products(store: Store, start: int, rng: random.Random) -> list[Product]:
    products = []
    for j in range(PRODUCTS_PER_STORE):
        name = PRODUCT_NAMES[(start + j) % len(PRODUCT_NAMES)]
        products.append(
            Product(
                store_id=store.id,
                name=f"{name} ({store.name})",
                category=CATEGORIES[j % len(CATEGORIES)],
                price=round(5 + rng.random() * 95, 2),
                quantity_in_stock=rng.randint(1, 50),
            )
        )
    return products


async def main(seed: int | None = None) -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    rng = random.Random(seed)
    engine, session_factory = create_session_factory(settings.database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with session_factory() as db:
            await db.execute(delete(Product))
            await db.execute(delete(Store))

            stores = [Store(name=name) for name in STORE_NAMES]
            db.add_all(stores)
            await db.flush()

            for i, store in enumerate(stores):
                db.add_all(build_demo_products(store, i * PRODUCTS_PER_STORE, rng))
            await db.commit()
    finally:
        await engine.dispose()

    logger.info(
        f"Seed complete: {len(STORE_NAMES)} stores, "
        f"{len(STORE_NAMES) * PRODUCTS_PER_STORE} products."
    )


if __name__ == "__main__":
    asyncio.run(main())
