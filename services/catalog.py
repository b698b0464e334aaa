from __future__ import annotations

from typing import List, Tuple

from config.settings import settings
from models.item import Item


# -----------------------------------------------------------------------------
# In-memory catalogue
# -----------------------------------------------------------------------------
class Catalog:
    """Fixed, read-only collection of items served by the /items router."""

    def __init__(self, size: int):
        self._items: List[Item] = [
            Item(id=i, name=f"Item {i}") for i in range(1, size + 1)
        ]

    def page(self, page: int, per_page: int) -> Tuple[List[Item], int]:
        """Return the items of ``page`` and the total item count."""
        start = (page - 1) * per_page
        return self._items[start:start + per_page], len(self._items)


catalog = Catalog(size=settings.SAMPLE_ITEM_COUNT)


def get_catalog() -> Catalog:
    """FastAPI dependency so tests can swap the catalogue."""
    return catalog
