"""Product model.

The model only describes storage.  Business constraints (lengths,
ranges, required fields, "not in the future" timestamps) are enforced
by ``ProductValidator`` before every persistence attempt, so instances
may be built in an invalid state and inspected without touching the
database.

Decimal columns keep ten decimal places; finer fractions are rounded on
save.
"""

from __future__ import annotations

from django.db import models

from modules.products.constants import (
    DIMENSIONS_MAX_LENGTH,
    KEYWORDS_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    ProductStatus,
)


class Product(models.Model):
    """Product aggregate root.

    ``date_added`` and ``date_modified`` are supplied by the caller; neither
    the model nor the service stamps them.
    """

    title = models.CharField(max_length=TITLE_MAX_LENGTH)
    keywords = models.CharField(
        max_length=KEYWORDS_MAX_LENGTH, null=True, blank=True, default=None
    )
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    rating = models.IntegerField()
    quantity_in_stock = models.IntegerField()
    dimensions = models.CharField(
        max_length=DIMENSIONS_MAX_LENGTH, null=True, blank=True, default=None
    )
    price = models.DecimalField(max_digits=30, decimal_places=10)
    status = models.CharField(max_length=20, choices=ProductStatus.choices)
    weight = models.DecimalField(
        max_digits=30, decimal_places=10, null=True, blank=True, default=None
    )
    date_added = models.DateTimeField()
    date_modified = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status"], name="products_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.title}"
