"""Product ORM: a stocked item belonging to exactly one Store.

Invariants:
    - store_id references an existing Store (FK, ON DELETE CASCADE)
    - category stored normalized (stripped, lower-case)
    - price > 0 and quantity_in_stock >= 0 (CHECK constraints back the schema rules)
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, DateTime, Float, ForeignKey, Integer, String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.core.domain_types import (
    CATEGORY_MAX_LENGTH, ID_LENGTH, NAME_MAX_LENGTH, new_id,
)
from inventory_api.db.base import Base


class Product(Base):
    """Product entity."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        CheckConstraint(
            "quantity_in_stock >= 0", name="ck_products_quantity_non_negative",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=new_id,
    )
    store_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    category: Mapped[str] = mapped_column(
        String(CATEGORY_MAX_LENGTH), nullable=False, index=True,
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity_in_stock: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    store: Mapped["Store"] = relationship("Store", back_populates="products")
