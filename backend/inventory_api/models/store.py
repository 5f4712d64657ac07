"""Store ORM: the aggregate root owning a set of products.

Invariants:
    - id is an app-generated opaque string (UUID4 text)
    - name is non-nullable and stored stripped
    - Deleting a Store deletes its Products (ORM cascade + ON DELETE CASCADE)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_api.core.domain_types import ID_LENGTH, NAME_MAX_LENGTH, new_id
from inventory_api.db.base import Base


class Store(Base):
    """Store aggregate root."""
    __tablename__ = "stores"

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=new_id,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="store",
        cascade="all, delete-orphan", order_by="Product.name",
    )
