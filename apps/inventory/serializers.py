"""
Serializers for the product catalogue.
"""

from decimal import Decimal

from rest_framework import serializers

from .models import Product

REQUIRED_MESSAGE = "Product name and price are required."


class ProductSerializer(serializers.ModelSerializer):
    """Product payload; price is rendered as a decimal string."""

    name = serializers.CharField(
        max_length=200,
        error_messages={"required": REQUIRED_MESSAGE, "blank": REQUIRED_MESSAGE, "null": REQUIRED_MESSAGE},
    )
    sku = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        error_messages={
            "required": REQUIRED_MESSAGE,
            "null": REQUIRED_MESSAGE,
            "min_value": "Price cannot be negative.",
        },
    )
    stock = serializers.IntegerField(
        required=False,
        min_value=0,
        error_messages={"min_value": "Stock cannot be negative."},
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "sku", "price", "stock", "createdAt"]
        read_only_fields = ["id"]

    def validate_sku(self, value):
        return value or ""
