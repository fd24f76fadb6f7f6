"""Product domain constants.

Defines the status choices and the inclusive bounds enforced by the
product rule table (see ``modules.products.validation``).
"""

from decimal import Decimal

from django.db import models


class ProductStatus(models.TextChoices):
    IN_STOCK = "IN_STOCK", "In stock"
    OUT_OF_STOCK = "OUT_OF_STOCK", "Out of stock"
    PREORDER = "PREORDER", "Pre-order"
    DISCONTINUED = "DISCONTINUED", "Discontinued"


TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100

KEYWORDS_MAX_LENGTH = 200

DESCRIPTION_MIN_LENGTH = 50

RATING_MIN = 1
RATING_MAX = 10

QUANTITY_IN_STOCK_MIN = 0

DIMENSIONS_MAX_LENGTH = 50

PRICE_MIN = Decimal("1.00")
PRICE_MAX = Decimal("9999.00")

WEIGHT_MIN = Decimal("0")
