"""Product service layer (Use Cases).

Gates persistence of the Product aggregate on validation, delegating
storage to the injected ``IProductRepository``.

Save contract:
- Every save is validated first against the full product rule table.
- Any violation aborts with ``ValidationFailed``; the repository is not
  touched.
- A valid product is handed to ``repository.save`` exactly once and the
  repository's result is returned as-is.  Timestamps are never stamped
  here; callers supply ``date_added``/``date_modified``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from modules.products.exceptions import ProductNotFound, ValidationFailed
from modules.products.validation import ProductValidator

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` (and optionally a validator) via
    constructor injection.
    """

    def __init__(
        self,
        repository: IProductRepository,
        validator: Optional[ProductValidator] = None,
    ) -> None:
        self._repo = repository
        self._validator = validator or ProductValidator()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save(self, product: Product) -> Product:
        """Validate ``product`` and persist it.

        Raises:
            ValidationFailed: the product breaks one or more constraints.
            InvalidArgument: ``product`` is ``None`` or not a Product.
        """
        log = logger.bind(product_id=getattr(product, "id", None))

        violations = self._validator.validate(product)
        if violations:
            log.warning(
                "product.validation_failed",
                fields=[v.field for v in violations],
            )
            raise ValidationFailed(violations)

        saved = self._repo.save(product)
        log.info("product.saved", product_id=getattr(saved, "id", None))
        return saved

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Build a product from ``dto`` and run it through ``save``."""
        return self.save(dto.to_entity())

    def delete_product(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return a list of products, optionally filtered."""
        return self._repo.list(filters)

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return product
