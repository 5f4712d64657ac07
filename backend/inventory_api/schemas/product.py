"""Product Schemas: field-level validation for product mutations and read models.

Invariants:
    - storeId, name, category: stripped, non-empty
    - category normalized to lower-case before it reaches the service layer
    - price: finite and > 0 (numeric strings coerce)
    - quantityInStock: integer in [0, MAX_QUANTITY] (3.0 and "3" coerce, 3.5 is rejected)
    - name, category: at most NAME_MAX_LENGTH / CATEGORY_MAX_LENGTH after stripping
    - JSON booleans are never read as a price or quantity
    - ProductUpdate: every field optional; omitted or null fields are left unchanged
"""

from datetime import datetime

from pydantic import Field, field_validator

from inventory_api.core.domain_types import (
    CATEGORY_MAX_LENGTH, MAX_QUANTITY, NAME_MAX_LENGTH,
)
from inventory_api.core.product_query import normalize_category
from inventory_api.schemas.common import CamelModel, reject_bool, required_text
from inventory_api.schemas.store import StoreRead, StoreRef


class ProductCreate(CamelModel):
    store_id: str
    name: str
    category: str
    price: float = Field(gt=0, allow_inf_nan=False)
    quantity_in_stock: int = Field(ge=0, le=MAX_QUANTITY)

    @field_validator("price", "quantity_in_stock", mode="before")
    @classmethod
    def numbers_not_bools(cls, v):
        return reject_bool(v)

    @field_validator("store_id")
    @classmethod
    def strip_store_id(cls, v: str) -> str:
        return required_text(v, "Store ID")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return required_text(v, "Name", NAME_MAX_LENGTH)

    @field_validator("category")
    @classmethod
    def normalize(cls, v: str) -> str:
        return normalize_category(required_text(v, "Category", CATEGORY_MAX_LENGTH))


class ProductUpdate(CamelModel):
    store_id: str | None = None
    name: str | None = None
    category: str | None = None
    price: float | None = Field(None, gt=0, allow_inf_nan=False)
    quantity_in_stock: int | None = Field(None, ge=0, le=MAX_QUANTITY)

    @field_validator("price", "quantity_in_stock", mode="before")
    @classmethod
    def numbers_not_bools(cls, v):
        return reject_bool(v)

    @field_validator("store_id")
    @classmethod
    def strip_store_id(cls, v: str | None) -> str | None:
        return None if v is None else required_text(v, "Store ID")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return None if v is None else required_text(v, "Name", NAME_MAX_LENGTH)

    @field_validator("category")
    @classmethod
    def normalize(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return normalize_category(required_text(v, "Category", CATEGORY_MAX_LENGTH))

    def changes(self) -> dict:
        """Fields the client actually supplied with a non-null value."""
        return {
            k: v for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None
        }


class ProductRead(CamelModel):
    id: str
    store_id: str
    name: str
    category: str
    price: float
    quantity_in_stock: int
    created_at: datetime


class ProductWithStore(ProductRead):
    store: StoreRef


class ProductDetail(ProductRead):
    store: StoreRead


class ProductPage(CamelModel):
    data: list[ProductWithStore]
    total: int
    page: int
    limit: int


class StoreDetail(StoreRead):
    products: list[ProductRead]
