# console/views/users.py

"""
CONSOLE: USERS

- GET       /console/users/              list (newest first)
- GET/POST  /console/users/<id>/edit/    profile, role, verification, avatar
- GET/POST  /console/users/<id>/delete/  confirm, then delete
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import redirect
from django.views.generic import FormView, TemplateView

from accounts.session import update_session_record
from console.forms import UserForm
from console.services.users import (
    avatar_url,
    delete_user,
    get_user,
    list_users,
    update_user,
)
from console.views.base import ConsoleView, RecordObjectMixin
from records.exceptions import RecordServiceError

logger = logging.getLogger(__name__)

LIST_FAILED = "Failed to load users. You may need admin privileges."
UPDATE_FAILED = "Failed to update record."


class UserListView(ConsoleView, TemplateView):
    template_name = "console/users/list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            users = list_users(self.client)
        except RecordServiceError as exc:
            logger.warning("User list failed: %s", exc.message, extra={"status": exc.status})
            users = []
            context["error"] = LIST_FAILED
        context["rows"] = [
            {"user": user, "avatar_url": avatar_url(self.client, user, thumb="100x100")}
            for user in users
        ]
        return context


class UserUpdateView(ConsoleView, RecordObjectMixin, FormView):
    template_name = "console/users/form.html"
    form_class = UserForm
    load_error_message = "Could not load user data."
    list_url_name = "console:user-list"

    def load_object(self, pk):
        return get_user(self.client, pk)

    def get_initial(self):
        return UserForm.initial_from_record(self.object.record)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["edited_user"] = self.object
        context["avatar_preview"] = self.object.avatar_url(self.client)
        return context

    def form_valid(self, form):
        data = dict(form.cleaned_data)
        avatar = data.pop("avatar", None)
        try:
            user = update_user(self.client, self.object.id, data, avatar=avatar)
        except RecordServiceError as exc:
            message = exc.display_message("Update failed") if exc.field_errors() else UPDATE_FAILED
            messages.error(self.request, message)
            return self.render_to_response(self.get_context_data(form=form))

        update_session_record(self.request, user.record)
        messages.success(self.request, "User updated successfully!")
        return redirect(self.list_url_name)


class UserDeleteView(ConsoleView, RecordObjectMixin, TemplateView):
    template_name = "console/confirm_delete.html"
    load_error_message = "Could not load user data."
    list_url_name = "console:user-list"

    def load_object(self, pk):
        return get_user(self.client, pk)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "question": f'Delete "{self.object.display_name}"?',
                "cancel_url_name": self.list_url_name,
            }
        )
        return context

    def post(self, request, *args, **kwargs):
        try:
            delete_user(self.client, self.object.id)
        except RecordServiceError as exc:
            messages.error(request, f"Failed to delete user: {exc.message}")
        else:
            messages.success(request, "User deleted successfully!")
        return redirect(self.list_url_name)
