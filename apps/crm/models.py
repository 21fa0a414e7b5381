"""
Customer records referenced by documents.
"""

import uuid

from django.db import models
from django.utils import timezone


class Customer(models.Model):
    """
    A customer of the shop.

    Documents keep their own snapshot of the customer name, so renaming or
    deleting a customer never rewrites existing documents.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the customer",
    )

    name = models.CharField(max_length=200, help_text="Customer's display name")
    phone = models.CharField(max_length=20, blank=True, default="", help_text="Phone number")
    email = models.CharField(max_length=100, blank=True, default="", help_text="Email address")

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "customers"
        ordering = ["created_at"]
        verbose_name = "Customer"
        verbose_name_plural = "Customers"
        indexes = [
            models.Index(fields=["name"], name="customer_name_idx"),
            models.Index(fields=["phone"], name="customer_phone_idx"),
        ]

    def __str__(self):
        return self.name
