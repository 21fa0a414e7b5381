import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import django_fsm
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("crm", "0001_initial"),
        ("inventory", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Document",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the document",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "doc_number",
                    models.CharField(
                        editable=False,
                        help_text="Human-readable number, e.g. QT-2024-001",
                        max_length=50,
                        unique=True,
                    ),
                ),
                (
                    "doc_type",
                    models.CharField(
                        choices=[
                            ("quotation", "Quotation"),
                            ("voi", "Delivery Note"),
                            ("receipt", "Receipt"),
                        ],
                        help_text="Kind of document",
                        max_length=20,
                    ),
                ),
                (
                    "customer_name",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Customer name at the time the document was written",
                        max_length=200,
                    ),
                ),
                (
                    "subtotal",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Sum of line item totals",
                        max_digits=12,
                    ),
                ),
                (
                    "tax",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Tax on the subtotal",
                        max_digits=12,
                    ),
                ),
                (
                    "total",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Subtotal plus tax",
                        max_digits=12,
                    ),
                ),
                (
                    "status",
                    django_fsm.FSMField(
                        choices=[
                            ("draft", "Draft"),
                            ("confirmed", "Confirmed"),
                            ("converted", "Converted"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="draft",
                        help_text="Current status",
                        max_length=50,
                    ),
                ),
                ("notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "converted_from",
                    models.ForeignKey(
                        blank=True,
                        help_text="Quotation this receipt was converted from",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="conversions",
                        to="documents.document",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        help_text="User who created the document",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="documents",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        blank=True,
                        help_text="Customer the document was issued to",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="documents",
                        to="crm.customer",
                    ),
                ),
            ],
            options={
                "verbose_name": "Document",
                "verbose_name_plural": "Documents",
                "db_table": "documents",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["doc_type", "created_at"], name="document_type_created_idx"
                    ),
                    models.Index(fields=["status"], name="document_status_idx"),
                    models.Index(
                        fields=["customer_name"], name="document_customer_name_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="DocumentItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "position",
                    models.PositiveIntegerField(help_text="Zero-based order within the document"),
                ),
                (
                    "product_name",
                    models.CharField(help_text="Product name when written", max_length=200),
                ),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                (
                    "unit_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("total", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "document",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="documents.document",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="document_items",
                        to="inventory.product",
                    ),
                ),
            ],
            options={
                "verbose_name": "Document Item",
                "verbose_name_plural": "Document Items",
                "db_table": "document_items",
                "ordering": ["position"],
                "unique_together": {("document", "position")},
            },
        ),
    ]
