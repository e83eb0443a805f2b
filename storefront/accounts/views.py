# accounts/views.py

"""
AUTH PAGES

- GET/POST /login/     email + password against the `users` collection
- GET/POST /register/  create a `users` record, then send the visitor to login
- POST     /logout/    clear the session auth state
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import FormView

from accounts.forms import LoginForm, RegisterForm
from accounts.session import login_session, logout_session
from records.client import get_client
from records.exceptions import RecordServiceError

logger = logging.getLogger(__name__)

USERS = "users"

LOGIN_FAILED = "Failed to login. Please check your credentials."
REGISTER_FAILED = "Failed to register."
REGISTER_SUCCESS = (
    "Registration successful! Please check your email to verify your account "
    "before logging in."
)


class LoginView(FormView):
    template_name = "accounts/login.html"
    form_class = LoginForm

    def dispatch(self, request, *args, **kwargs):
        if request.shop_user.is_authenticated:
            return redirect(self._landing_url(request.shop_user))
        return super().dispatch(request, *args, **kwargs)

    def _landing_url(self, user) -> str:
        next_url = self.request.POST.get("next") or self.request.GET.get("next") or ""
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url

        if user.is_admin:
            return reverse("console:dashboard")
        return reverse("catalog:home")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["next"] = self.request.GET.get("next", "")
        return context

    def form_valid(self, form):
        email = form.cleaned_data["email"]
        password = form.cleaned_data["password"]

        try:
            auth_data = get_client().auth_with_password(USERS, email, password)
        except RecordServiceError as exc:
            logger.warning("Login failed: %s", exc.message, extra={"status": exc.status})
            form.add_error(None, exc.payload.get("message") or LOGIN_FAILED)
            return self.form_invalid(form)

        user = login_session(self.request, auth_data)
        return redirect(self._landing_url(user))


class RegisterView(FormView):
    template_name = "accounts/register.html"
    form_class = RegisterForm

    def form_valid(self, form):
        password = form.cleaned_data["password"]
        data = {
            "email": form.cleaned_data["email"],
            "password": password,
            "passwordConfirm": form.cleaned_data["password_confirm"],
            "emailVisibility": True,
        }

        try:
            get_client().create(USERS, data)
        except RecordServiceError as exc:
            logger.warning("Registration failed: %s", exc.message, extra={"status": exc.status})
            message = exc.field_errors().get("email") or exc.message or REGISTER_FAILED
            form.add_error(None, message)
            return self.form_invalid(form)

        messages.success(self.request, REGISTER_SUCCESS)
        return redirect("accounts:login")


class LogoutView(View):
    http_method_names = ["post"]

    def post(self, request, *args, **kwargs):
        logout_session(request)
        return redirect("catalog:home")
