"""Product validation: rule table and evaluator.

Every product constraint lives in ``PRODUCT_RULES``, an ordered table of
``FieldRule`` entries.  ``ProductValidator`` walks that table in order and
collects at most one ``Violation`` per field, so the result (and therefore
"first violation" look-ups) is deterministic.

Rules:
- title: required, length 3..100.
- keywords: optional, length 0..200.
- description: optional, length >= 50 when present.
- rating: required, 1..10.
- quantityInStock: required, >= 0.
- dimensions: optional, length 0..50.
- price: required, 1.00..9999.00.
- status: required, one of ``ProductStatus``.
- weight: optional, >= 0 when present.
- dateAdded: required, not after "now".
- dateModified: optional, not after "now".  No ordering against dateAdded.

Failures are returned as data; only a missing or non-Product argument
raises (``InvalidArgument``).
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, List, Optional, Tuple

from django.core.exceptions import ValidationError
from django.core.validators import (
    MaxLengthValidator,
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.utils import timezone

from modules.products.constants import (
    DESCRIPTION_MIN_LENGTH,
    DIMENSIONS_MAX_LENGTH,
    KEYWORDS_MAX_LENGTH,
    PRICE_MAX,
    PRICE_MIN,
    QUANTITY_IN_STOCK_MIN,
    RATING_MAX,
    RATING_MIN,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    WEIGHT_MIN,
    ProductStatus,
)
from modules.products.exceptions import InvalidArgument
from modules.products.models import Product

# Kinds; the bound kinds are the codes of the django.core.validators used below.
REQUIRED = "required"
TYPE = "type"
MIN_LENGTH = "min_length"
MAX_LENGTH = "max_length"
MIN_VALUE = "min_value"
MAX_VALUE = "max_value"
CHOICE = "choice"
FUTURE = "future"

# A check receives the (present) field value and the evaluation timestamp and
# returns ``(kind, message)`` on failure, ``None`` on success.
Check = Callable[[Any, dt.datetime], Optional[Tuple[str, str]]]


@dataclass(frozen=True)
class Violation:
    """A single failed constraint, addressed by field path."""

    field: str
    kind: str
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one product field.

    ``field`` is the public field path reported in violations, ``attribute``
    the Python attribute read from the product.
    """

    field: str
    attribute: str
    required: bool
    checks: Tuple[Check, ...]

    def evaluate(self, value: Any, now: dt.datetime) -> Optional[Violation]:
        # Django text columns default to "", which means "not supplied".
        if value is None or (self.required and value == ""):
            if self.required:
                return Violation(self.field, REQUIRED, "must not be null")
            return None
        for check in self.checks:
            failure = check(value, now)
            if failure is not None:
                kind, message = failure
                return Violation(self.field, kind, message)
        return None


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def _is_text(value, now):
    if not isinstance(value, str):
        return TYPE, "must be a string"
    return None


def _is_integer(value, now):
    if isinstance(value, bool) or not isinstance(value, int):
        return TYPE, "must be an integer"
    return None


def _is_decimal(value, now):
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        return TYPE, "must be a decimal number"
    if isinstance(value, Decimal) and not value.is_finite():
        return TYPE, "must be a finite decimal number"
    return None


def _is_number(value, now):
    if isinstance(value, float):
        if not math.isfinite(value):
            return TYPE, "must be a finite number"
        return None
    return _is_decimal(value, now)


def _is_datetime(value, now):
    if not isinstance(value, dt.datetime):
        return TYPE, "must be a datetime"
    return None


def _is_status(value, now):
    if not isinstance(value, str) or value not in ProductStatus.values:
        allowed = ", ".join(ProductStatus.values)
        return CHOICE, f"must be one of {allowed}"
    return None


def bounded(*validators: Callable[[Any], None]) -> Check:
    """Wrap Django validators as a check, first failure wins.

    The ``ValidationError`` code (``min_length``, ``max_value``, ...) becomes
    the violation kind.
    """

    def check(value, now):
        for validator in validators:
            try:
                validator(value)
            except ValidationError as exc:
                return exc.code, exc.messages[0]
        return None

    return check


def _not_in_future(value, now):
    if as_utc(value) > now:
        return FUTURE, "must be a date in the past or in the present"
    return None


def as_utc(value: dt.datetime) -> dt.datetime:
    """Return ``value`` as an aware datetime; naive values are taken as UTC."""
    if timezone.is_naive(value):
        return timezone.make_aware(value, dt.timezone.utc)
    return value


# ---------------------------------------------------------------------------
# Rule table (evaluation order == reporting order)
# ---------------------------------------------------------------------------

PRODUCT_RULES: Tuple[FieldRule, ...] = (
    FieldRule(
        "title",
        "title",
        required=True,
        checks=(
            _is_text,
            bounded(
                MinLengthValidator(TITLE_MIN_LENGTH),
                MaxLengthValidator(TITLE_MAX_LENGTH),
            ),
        ),
    ),
    FieldRule(
        "keywords",
        "keywords",
        required=False,
        checks=(_is_text, bounded(MaxLengthValidator(KEYWORDS_MAX_LENGTH))),
    ),
    FieldRule(
        "description",
        "description",
        required=False,
        checks=(_is_text, bounded(MinLengthValidator(DESCRIPTION_MIN_LENGTH))),
    ),
    FieldRule(
        "rating",
        "rating",
        required=True,
        checks=(
            _is_integer,
            bounded(MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)),
        ),
    ),
    FieldRule(
        "quantityInStock",
        "quantity_in_stock",
        required=True,
        checks=(_is_integer, bounded(MinValueValidator(QUANTITY_IN_STOCK_MIN))),
    ),
    FieldRule(
        "dimensions",
        "dimensions",
        required=False,
        checks=(_is_text, bounded(MaxLengthValidator(DIMENSIONS_MAX_LENGTH))),
    ),
    FieldRule(
        "price",
        "price",
        required=True,
        checks=(
            _is_decimal,
            bounded(MinValueValidator(PRICE_MIN), MaxValueValidator(PRICE_MAX)),
        ),
    ),
    FieldRule("status", "status", required=True, checks=(_is_status,)),
    FieldRule(
        "weight",
        "weight",
        required=False,
        checks=(_is_number, bounded(MinValueValidator(WEIGHT_MIN))),
    ),
    FieldRule(
        "dateAdded",
        "date_added",
        required=True,
        checks=(_is_datetime, _not_in_future),
    ),
    FieldRule(
        "dateModified",
        "date_modified",
        required=False,
        checks=(_is_datetime, _not_in_future),
    ),
)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class ProductValidator:
    """Evaluates ``PRODUCT_RULES`` against a product.

    ``clock`` supplies "now" for the temporal rules; it is read once per
    ``validate`` call so both timestamps are judged against the same instant.
    The validator holds no mutable state and is safe to share.
    """

    def __init__(self, clock: Callable[[], dt.datetime] = timezone.now) -> None:
        self._clock = clock
        self._rules = PRODUCT_RULES

    def validate(
        self, product: Product, now: Optional[dt.datetime] = None
    ) -> List[Violation]:
        """Return every violation of ``product``, in field order.

        An empty list means the product is valid.

        Raises:
            InvalidArgument: ``product`` is ``None`` or not a ``Product``.
        """
        if product is None:
            raise InvalidArgument("Product to validate must not be None.")
        if not isinstance(product, Product):
            raise InvalidArgument(
                f"Expected a Product, got {type(product).__name__}."
            )

        now = as_utc(now if now is not None else self._clock())
        violations: List[Violation] = []
        for rule in self._rules:
            violation = rule.evaluate(getattr(product, rule.attribute), now)
            if violation is not None:
                violations.append(violation)
        return violations

    def is_valid(self, product: Product, now: Optional[dt.datetime] = None) -> bool:
        return not self.validate(product, now=now)


default_validator = ProductValidator()


def validate_product(
    product: Product, now: Optional[dt.datetime] = None
) -> List[Violation]:
    """Validate with the module-level default validator."""
    return default_validator.validate(product, now=now)
