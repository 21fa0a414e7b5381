"""
Core models for the POS back office.
"""

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Back-office user account.

    Two roles exist: owners manage other accounts, admins handle day-to-day
    customers, products, and documents.
    """

    # Role choices
    OWNER = "owner"
    ADMIN = "admin"

    ROLE_CHOICES = [
        (OWNER, "Owner"),
        (ADMIN, "Admin"),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the user",
    )

    full_name = models.CharField(
        max_length=200,
        blank=True,
        default="",
        help_text="Display name shown in the back office",
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ADMIN,
        help_text="User's role in the system",
    )

    class Meta:
        db_table = "users"
        ordering = ["date_joined"]
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    def is_owner(self):
        """Check if user is a shop owner."""
        return self.role == self.OWNER

    def is_admin(self):
        """Check if user is a back-office admin."""
        return self.role == self.ADMIN
