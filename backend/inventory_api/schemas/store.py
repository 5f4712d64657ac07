"""Store Schemas: create/update bodies and read models for stores and summaries.

Invariants:
    - StoreCreate.name: stripped, non-empty, at most NAME_MAX_LENGTH characters
    - StoreUpdate fields are optional; an omitted or null field is left unchanged
"""

from datetime import datetime

from pydantic import field_validator

from inventory_api.core.domain_types import NAME_MAX_LENGTH
from inventory_api.schemas.common import CamelModel, required_text


class StoreCreate(CamelModel):
    name: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return required_text(v, "Name", NAME_MAX_LENGTH)


class StoreUpdate(CamelModel):
    name: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return None if v is None else required_text(v, "Name", NAME_MAX_LENGTH)


class StoreRef(CamelModel):
    """Minimal store info embedded in product listings."""
    id: str
    name: str


class StoreRead(CamelModel):
    id: str
    name: str
    created_at: datetime


class StoreSummary(CamelModel):
    """Per-store inventory aggregate."""
    store_id: str
    store_name: str
    product_count: int
    total_inventory_value: float
    low_stock_count: int
