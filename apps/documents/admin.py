from django.contrib import admin

from .models import Document, DocumentItem


class DocumentItemInline(admin.TabularInline):
    model = DocumentItem
    extra = 0
    fields = ["position", "product", "product_name", "quantity", "unit_price", "total"]
    readonly_fields = ["total"]


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    """Admin interface for Document model."""

    list_display = [
        "doc_number",
        "doc_type",
        "customer_name",
        "total",
        "status",
        "created_by",
        "created_at",
    ]
    list_filter = ["doc_type", "status", "created_at"]
    search_fields = ["doc_number", "customer_name"]
    readonly_fields = [
        "id",
        "doc_number",
        "subtotal",
        "tax",
        "total",
        "status",
        "converted_from",
        "created_at",
    ]
    inlines = [DocumentItemInline]
    date_hierarchy = "created_at"
