# accounts/decorators.py

"""
ADMIN CONSOLE ACCESS

- Anonymous visitors are sent to the login page (with ?next=)
- Signed-in users without the admin role get 403
"""

from __future__ import annotations

from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied


def admin_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        user = request.shop_user
        if not user.is_authenticated:
            return redirect_to_login(request.get_full_path())
        if not user.is_admin:
            raise PermissionDenied("Admin privileges are required.")
        return view_func(request, *args, **kwargs)

    return _wrapped


class AdminRequiredMixin:
    """Class-based view counterpart of `admin_required`."""

    @classmethod
    def as_view(cls, **initkwargs):
        return admin_required(super().as_view(**initkwargs))
