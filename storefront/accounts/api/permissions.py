# accounts/api/permissions.py

from rest_framework.permissions import BasePermission

from accounts.roles import CONSOLE_ROLES


# ---------------- BASE ROLE PERMISSION ----------------
class HasRole(BasePermission):
    """
    Base permission to check user role safely.
    """

    allowed_roles = set()

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "role", None) in self.allowed_roles
        )


# ---------------- ROLE PERMISSIONS ----------------
class IsConsoleAdmin(HasRole):
    allowed_roles = set(CONSOLE_ROLES)
