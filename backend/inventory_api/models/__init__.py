"""ORM Models: SQLAlchemy declarative models for stores and products.

Invariants:
    - All models inherit from Base (db/base.py)
    - Store is the aggregate root; every Product is scoped by store_id

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from inventory_api.models.store import Store  # noqa: F401
from inventory_api.models.product import Product  # noqa: F401
