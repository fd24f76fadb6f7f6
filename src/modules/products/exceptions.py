"""Product domain exceptions.

Raised by the Validator and the Service Layer.  Callers (API layers,
scripts) catch these and translate them into their own responses;
``ValidationFailed.as_dict()`` gives a ready-made error body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Sequence

if TYPE_CHECKING:
    from modules.products.validation import Violation


class ProductError(Exception):
    """Base class for every product domain error."""


class InvalidArgument(ProductError):
    """The validator was handed ``None`` or something that is not a Product."""


class ValidationFailed(ProductError):
    """One or more product constraints failed.

    Carries the complete, ordered violation list so the caller can report
    every problem at once.  Nothing was persisted.
    """

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations: List[Violation] = list(violations)
        fields = ", ".join(self.fields)
        super().__init__(f"Product validation failed: {fields}.")

    @property
    def fields(self) -> List[str]:
        """Field paths of the violations, in evaluation order."""
        return [v.field for v in self.violations]

    def as_dict(self) -> Dict[str, Any]:
        from modules.products.dtos import ViolationDTO

        return {
            "detail": str(self),
            "errors": [
                ViolationDTO.from_violation(v).model_dump() for v in self.violations
            ],
        }


class ProductNotFound(ProductError):
    """The requested product does not exist."""
