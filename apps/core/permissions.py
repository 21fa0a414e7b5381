"""
Role-based permission classes for the back-office API.
"""

from rest_framework import permissions

from .models import User


class HasRole(permissions.BasePermission):
    """
    Permission class granting access to a fixed set of roles.

    Subclass and set ``allowed_roles``.
    """

    allowed_roles = ()
    message = "You do not have permission to access this resource."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role in self.allowed_roles


class IsOwner(HasRole):
    """
    Permission class restricting access to shop owners.
    """

    allowed_roles = (User.OWNER,)
    message = "Only the shop owner can access this resource."
