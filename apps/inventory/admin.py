from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "sku", "price", "stock", "created_at"]
    search_fields = ["name", "sku"]
    readonly_fields = ["id", "created_at"]
    ordering = ["name"]
