"""Store Routes: CRUD for stores plus the per-store inventory summary report.

Invariants:
    - /summaries is registered before /{store_id} so it is never read as an id
    - DELETE returns 204 with an empty body and cascades to the store's products
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.infrastructure.database import get_db
from inventory_api.schemas.common import ERROR_RESPONSES
from inventory_api.schemas.product import StoreDetail
from inventory_api.schemas.store import (
    StoreCreate, StoreRead, StoreSummary, StoreUpdate,
)
from inventory_api.services import inventory_mutations, inventory_queries

router = APIRouter(
    prefix="/api/stores", tags=["stores"], responses=ERROR_RESPONSES,
)


@router.get("", response_model=list[StoreRead])
async def list_stores(db: AsyncSession = Depends(get_db)):
    """List stores, name ascending."""
    return await inventory_queries.list_stores(db)


@router.get("/summaries", response_model=list[StoreSummary])
async def get_store_summaries(db: AsyncSession = Depends(get_db)):
    """Product count, inventory value and low-stock count for every store."""
    return await inventory_queries.store_summaries(db)


@router.get("/{store_id}", response_model=StoreDetail)
async def get_store(store_id: str, db: AsyncSession = Depends(get_db)):
    return await inventory_queries.get_store(db, store_id)


@router.post(
    "", response_model=StoreRead, status_code=status.HTTP_201_CREATED,
)
async def create_store(body: StoreCreate, db: AsyncSession = Depends(get_db)):
    return await inventory_mutations.create_store(db, body)


@router.put("/{store_id}", response_model=StoreRead)
async def update_store(
    store_id: str, body: StoreUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update: only supplied fields change."""
    return await inventory_mutations.update_store(db, store_id, body)


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_store(store_id: str, db: AsyncSession = Depends(get_db)):
    await inventory_mutations.delete_store(db, store_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
