from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin interface for Customer model."""

    list_display = ["name", "phone", "email", "created_at"]
    search_fields = ["name", "phone", "email"]
    readonly_fields = ["id", "created_at"]
    ordering = ["-created_at"]
