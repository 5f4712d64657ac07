"""Product Routes: filtered listing, categories and CRUD for products.

Invariants:
    - Listing query values are read as raw strings and parsed leniently
      (core/product_query.py); a malformed page/limit/price never yields 400
    - /categories is registered before /{product_id}
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.core.product_query import build_product_filter
from inventory_api.infrastructure.database import get_db
from inventory_api.schemas.common import ERROR_RESPONSES
from inventory_api.schemas.product import (
    ProductCreate, ProductDetail, ProductPage, ProductUpdate, ProductWithStore,
)
from inventory_api.services import inventory_mutations, inventory_queries

router = APIRouter(
    prefix="/api/products", tags=["products"], responses=ERROR_RESPONSES,
)


@router.get("", response_model=ProductPage)
async def list_products(
    store_id: str | None = Query(None, alias="storeId"),
    category: str | None = Query(None),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    low_stock: str | None = Query(None, alias="lowStock"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List products matching the filters, one page at a time."""
    flt = build_product_filter(
        store_id=store_id, category=category,
        min_price=min_price, max_price=max_price, low_stock=low_stock,
        page=page, limit=limit,
    )
    products, total = await inventory_queries.list_products(db, flt)
    return ProductPage(
        data=[ProductWithStore.model_validate(p) for p in products],
        total=total,
        page=flt.page,
        limit=flt.page_size,
    )


@router.get("/categories", response_model=list[str])
async def list_categories(
    store_id: str | None = Query(None, alias="storeId"),
    db: AsyncSession = Depends(get_db),
):
    """Distinct categories, ascending, optionally for one store."""
    return await inventory_queries.list_categories(db, store_id)


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(product_id: str, db: AsyncSession = Depends(get_db)):
    return await inventory_queries.get_product(db, product_id)


@router.post(
    "", response_model=ProductWithStore, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate, db: AsyncSession = Depends(get_db),
):
    return await inventory_mutations.create_product(db, body)


@router.put("/{product_id}", response_model=ProductWithStore)
async def update_product(
    product_id: str, body: ProductUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update: only supplied fields change; category is re-normalized."""
    return await inventory_mutations.update_product(db, product_id, body)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, db: AsyncSession = Depends(get_db)):
    await inventory_mutations.delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
