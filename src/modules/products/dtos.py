"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``) and speak camelCase on the wire, matching the
field paths reported by the validator.

- ``CreateProductDTO``: input for product creation.  It only parses shapes
  and types; business constraints are the validator's job, so missing or
  out-of-range values pass through and are reported as violations later.
- ``ProductOutputDTO``: output with all product fields.
- ``ViolationDTO``: one entry of a validation error body.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.validation import Violation


_CAMEL_CASE = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = _CAMEL_CASE

    title: Optional[str] = None
    keywords: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[int] = None
    quantity_in_stock: Optional[int] = None
    dimensions: Optional[str] = None
    price: Optional[Decimal] = None
    status: Optional[str] = None
    weight: Optional[Decimal] = None
    date_added: Optional[datetime] = None
    date_modified: Optional[datetime] = None

    def to_entity(self) -> Product:
        """Build an unsaved Product carrying exactly the supplied values."""
        from modules.products.models import Product

        return Product(**self.model_dump())


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product responses."""

    model_config = _CAMEL_CASE

    id: Optional[int]
    title: str
    keywords: Optional[str]
    description: Optional[str]
    rating: int
    quantity_in_stock: int
    dimensions: Optional[str]
    price: Decimal
    status: str
    weight: Optional[Decimal]
    date_added: datetime
    date_modified: Optional[datetime]

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            title=product.title,
            keywords=product.keywords,
            description=product.description,
            rating=product.rating,
            quantity_in_stock=product.quantity_in_stock,
            dimensions=product.dimensions,
            price=product.price,
            status=product.status,
            weight=product.weight,
            date_added=product.date_added,
            date_modified=product.date_modified,
        )


class ViolationDTO(BaseModel):
    """Immutable DTO describing a single failed constraint."""

    model_config = ConfigDict(frozen=True)

    field: str
    kind: str
    message: str

    @classmethod
    def from_violation(cls, violation: Violation) -> ViolationDTO:
        return cls(
            field=violation.field,
            kind=violation.kind,
            message=violation.message,
        )
