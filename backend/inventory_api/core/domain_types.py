"""Domain Types: id factory and inventory constants.

Invariants:
    - Ids are opaque strings (UUID4 text, never parsed)
    - LOW_STOCK_THRESHOLD is the single low-stock boundary (quantity < threshold)
    - Page size is always within [MIN_PAGE_SIZE, MAX_PAGE_SIZE]
    - Text and integer limits match the storage columns they are written to
"""

import uuid


def new_id() -> str:
    return str(uuid.uuid4())


# ─── Inventory Constants ─────────────────────────────────────────

LOW_STOCK_THRESHOLD = 5

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# ─── Storage Limits ──────────────────────────────────────────────

ID_LENGTH = 36
NAME_MAX_LENGTH = 255
CATEGORY_MAX_LENGTH = 100
# 32-bit signed INTEGER column
MAX_QUANTITY = 2**31 - 1
# keeps (page - 1) * MAX_PAGE_SIZE well inside a 64-bit OFFSET
MAX_PAGE = 2**31 - 1
