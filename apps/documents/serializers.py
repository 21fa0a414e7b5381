"""
Serializers for documents.

Output uses camelCase keys. Document-level amounts are decimal strings while
line item amounts are JSON numbers, matching what the frontend consumes.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.crm.models import Customer
from apps.inventory.models import Product

from .models import Document, DocumentItem

ITEMS_REQUIRED_MESSAGE = "Document type and at least one line item are required."
MAX_QUANTITY = 1_000_000


class BlankAsNullCharField(serializers.CharField):
    """Renders an empty string as null."""

    def to_representation(self, value):
        return super().to_representation(value) or None


class DocumentItemSerializer(serializers.ModelSerializer):
    """Read-only representation of a line item."""

    productId = serializers.UUIDField(source="product_id", read_only=True, allow_null=True)
    productName = serializers.CharField(source="product_name", read_only=True)
    unitPrice = serializers.DecimalField(
        source="unit_price", max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True
    )
    total = serializers.DecimalField(
        max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True
    )

    class Meta:
        model = DocumentItem
        fields = ["productId", "productName", "quantity", "unitPrice", "total"]
        read_only_fields = fields


class DocumentSerializer(serializers.ModelSerializer):
    """Full document with its line items."""

    docNumber = serializers.CharField(source="doc_number", read_only=True)
    docType = serializers.CharField(source="doc_type", read_only=True)
    customerId = serializers.UUIDField(source="customer_id", read_only=True, allow_null=True)
    customerName = BlankAsNullCharField(source="customer_name", read_only=True)
    notes = BlankAsNullCharField(read_only=True)
    items = DocumentItemSerializer(many=True, read_only=True)
    convertedFrom = serializers.UUIDField(source="converted_from_id", read_only=True, allow_null=True)
    createdBy = serializers.UUIDField(source="created_by_id", read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Document
        fields = [
            "id",
            "docNumber",
            "docType",
            "customerId",
            "customerName",
            "items",
            "subtotal",
            "tax",
            "total",
            "status",
            "notes",
            "convertedFrom",
            "createdBy",
            "createdAt",
        ]
        read_only_fields = fields


class LineItemInputSerializer(serializers.Serializer):
    """
    A line item as submitted by the client.

    ``unitPrice`` defaults to the product's current price. Any ``total`` sent
    by the client is ignored and recomputed.
    """

    productId = serializers.PrimaryKeyRelatedField(
        source="product",
        queryset=Product.objects.all(),
        pk_field=serializers.UUIDField(),
        error_messages={
            "required": "productId is required.",
            "does_not_exist": "Product not found.",
            "incorrect_type": "Invalid productId.",
        },
    )
    productName = serializers.CharField(
        source="product_name", max_length=200, required=False, allow_blank=True, allow_null=True
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=MAX_QUANTITY,
        error_messages={
            "min_value": "Quantity must be a positive integer.",
            "max_value": f"Quantity cannot exceed {MAX_QUANTITY}.",
        },
    )
    unitPrice = serializers.DecimalField(
        source="unit_price",
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        allow_null=True,
        error_messages={"min_value": "Unit price cannot be negative."},
    )


class DocumentWriteSerializer(serializers.Serializer):
    """Shared fields for creating and updating documents."""

    customerId = serializers.PrimaryKeyRelatedField(
        source="customer",
        queryset=Customer.objects.all(),
        pk_field=serializers.UUIDField(),
        required=False,
        allow_null=True,
        error_messages={"does_not_exist": "Customer not found.", "incorrect_type": "Invalid customerId."},
    )
    customerName = serializers.CharField(
        source="customer_name", max_length=200, required=False, allow_blank=True, allow_null=True
    )
    items = LineItemInputSerializer(many=True, required=False)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(
        choices=Document.STATUS_CHOICES,
        required=False,
        error_messages={"invalid_choice": "Invalid status."},
    )

    def validate_items(self, value):
        if not value:
            raise serializers.ValidationError("At least one line item is required.")
        return value


class DocumentCreateSerializer(DocumentWriteSerializer):
    """Input for POST /api/documents."""

    docType = serializers.ChoiceField(
        source="doc_type",
        choices=Document.DOC_TYPE_CHOICES,
        error_messages={
            "required": ITEMS_REQUIRED_MESSAGE,
            "invalid_choice": "Invalid document type.",
        },
    )
    status = serializers.ChoiceField(
        choices=[(Document.DRAFT, "Draft"), (Document.CONFIRMED, "Confirmed")],
        default=Document.DRAFT,
        error_messages={"invalid_choice": "New documents must be draft or confirmed."},
    )

    def validate(self, attrs):
        if not attrs.get("items"):
            raise serializers.ValidationError(ITEMS_REQUIRED_MESSAGE)
        return attrs


class DocumentUpdateSerializer(DocumentWriteSerializer):
    """Input for PATCH /api/documents/<id>; every field is optional."""


class DocumentSummarySerializer(serializers.Serializer):
    totalRevenue = serializers.DecimalField(source="total_revenue", max_digits=14, decimal_places=2)
    quotationCount = serializers.IntegerField(source="quotation_count")
    voiCount = serializers.IntegerField(source="voi_count")
    receiptCount = serializers.IntegerField(source="receipt_count")
