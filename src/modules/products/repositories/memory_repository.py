"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by ID and assigns the next free ID to new
entities.  Used as a fake in tests and for embedded use where no database
is configured.  Not synchronised: share one instance per thread.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductInMemoryRepository(IProductRepository):
    """Product repository backed by a plain dict."""

    def __init__(self) -> None:
        self._items: Dict[int, Product] = {}

    def get_by_id(self, id: int) -> Optional[Product]:
        return self._items.get(id)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products, keeping those whose attributes equal every filter."""
        products = [self._items[key] for key in sorted(self._items)]
        if filters:
            products = [
                p
                for p in products
                if all(getattr(p, name) == value for name, value in filters.items())
            ]
        return products

    def save(self, entity: Product) -> Product:
        if entity.id is None:
            entity.id = max(self._items, default=0) + 1
        self._items[entity.id] = entity
        logger.info("product.persisted", product_id=entity.id, backend="memory")
        return entity

    def delete(self, id: int) -> bool:
        if self._items.pop(id, None) is None:
            return False
        logger.info("product.removed", product_id=id, backend="memory")
        return True
