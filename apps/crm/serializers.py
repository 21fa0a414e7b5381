"""
Serializers for customer records.
"""

from rest_framework import serializers

from .models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Customer payload with camelCase keys."""

    name = serializers.CharField(
        max_length=200,
        error_messages={
            "required": "Customer name is required.",
            "blank": "Customer name is required.",
            "null": "Customer name is required.",
        },
    )
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    email = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Customer
        fields = ["id", "name", "phone", "email", "createdAt"]
        read_only_fields = ["id"]

    def validate_phone(self, value):
        return value or ""

    def validate_email(self, value):
        return value or ""
