"""
Product catalogue used to build document line items.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Product(models.Model):
    """
    A sellable product.

    Line items copy the product name and price at write time, so later
    catalogue edits leave existing documents untouched.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the product",
    )

    name = models.CharField(max_length=200, help_text="Product name")
    sku = models.CharField(max_length=50, blank=True, default="", help_text="Stock keeping unit")

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit selling price",
    )

    stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Units on hand",
    )

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "products"
        ordering = ["created_at"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=["name"], name="product_name_idx"),
            models.Index(fields=["sku"], name="product_sku_idx"),
        ]

    def __str__(self):
        if self.sku:
            return f"{self.sku} - {self.name}"
        return self.name

    def is_in_stock(self):
        return self.stock > 0
