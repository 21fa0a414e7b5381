"""
Django admin configuration for core models.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for back-office users."""

    list_display = ["username", "full_name", "role", "is_active", "date_joined"]
    list_filter = ["role", "is_active"]
    search_fields = ["username", "full_name", "email"]
    ordering = ["date_joined"]

    fieldsets = BaseUserAdmin.fieldsets + (("Back office", {"fields": ("full_name", "role")}),)
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Back office", {"fields": ("full_name", "role")}),
    )
