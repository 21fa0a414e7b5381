"""
Sales documents: quotations, delivery notes (VOI) and receipts.

A document carries its own snapshot of the customer name and of each line
item's product name, so edits to customers or products never rewrite
documents that were already issued.
"""

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django_fsm import FSMField, transition

from apps.crm.models import Customer
from apps.inventory.models import Product


class Document(models.Model):
    """
    A numbered sales document.

    Status lifecycle:
        draft -> confirmed -> converted
        draft | confirmed -> cancelled

    ``converted`` is reached only by converting a quotation into a receipt;
    ``converted`` and ``cancelled`` are terminal.
    """

    # Document types
    QUOTATION = "quotation"
    VOI = "voi"
    RECEIPT = "receipt"

    DOC_TYPE_CHOICES = [
        (QUOTATION, "Quotation"),
        (VOI, "Delivery Note"),
        (RECEIPT, "Receipt"),
    ]

    # Status choices
    DRAFT = "draft"
    CONFIRMED = "confirmed"
    CONVERTED = "converted"
    CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (DRAFT, "Draft"),
        (CONFIRMED, "Confirmed"),
        (CONVERTED, "Converted"),
        (CANCELLED, "Cancelled"),
    ]

    TERMINAL_STATUSES = (CONVERTED, CANCELLED)

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the document",
    )

    doc_number = models.CharField(
        max_length=50,
        unique=True,
        editable=False,
        help_text="Human-readable number, e.g. QT-2024-001",
    )

    doc_type = models.CharField(
        max_length=20, choices=DOC_TYPE_CHOICES, help_text="Kind of document"
    )

    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="documents",
        help_text="Customer the document was issued to",
    )
    customer_name = models.CharField(
        max_length=200,
        blank=True,
        default="",
        help_text="Customer name at the time the document was written",
    )

    # Financial details
    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Sum of line item totals",
    )
    tax = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Tax on the subtotal",
    )
    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Subtotal plus tax",
    )

    status = FSMField(default=DRAFT, choices=STATUS_CHOICES, help_text="Current status")

    notes = models.TextField(blank=True, default="")

    converted_from = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="conversions",
        help_text="Quotation this receipt was converted from",
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name="documents",
        help_text="User who created the document",
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "documents"
        ordering = ["-created_at"]
        verbose_name = "Document"
        verbose_name_plural = "Documents"
        indexes = [
            models.Index(fields=["doc_type", "created_at"], name="document_type_created_idx"),
            models.Index(fields=["status"], name="document_status_idx"),
            models.Index(fields=["customer_name"], name="document_customer_name_idx"),
        ]

    def __str__(self):
        return f"{self.doc_number} ({self.get_doc_type_display()})"

    def is_quotation(self):
        return self.doc_type == self.QUOTATION

    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    @transition(field=status, source=DRAFT, target=CONFIRMED)
    def confirm(self):
        """Confirm a draft document."""
        pass

    @transition(field=status, source=[DRAFT, CONFIRMED], target=CANCELLED)
    def cancel(self):
        """Cancel the document."""
        pass

    @transition(
        field=status,
        source=[DRAFT, CONFIRMED],
        target=CONVERTED,
        conditions=[is_quotation],
    )
    def mark_converted(self):
        """Mark a quotation as converted into a receipt."""
        pass


class DocumentItem(models.Model):
    """
    One line of a document, in display order.
    """

    document = models.ForeignKey(
        Document,
        on_delete=models.CASCADE,
        related_name="items",
    )
    position = models.PositiveIntegerField(help_text="Zero-based order within the document")

    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="document_items",
    )
    product_name = models.CharField(max_length=200, help_text="Product name when written")

    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    total = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        db_table = "document_items"
        ordering = ["position"]
        verbose_name = "Document Item"
        verbose_name_plural = "Document Items"
        unique_together = [["document", "position"]]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
