"""Product repository interface.

Extends ``IRepository[Product]``.  The save path only needs ``save``;
the look-ups back the supplementary read and delete use cases.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional equality filters on model attributes."""

    @abstractmethod
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product and return the stored entity."""
