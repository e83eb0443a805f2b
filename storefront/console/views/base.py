# console/views/base.py

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import redirect

from accounts.decorators import AdminRequiredMixin
from accounts.session import backend_client
from records.exceptions import RecordServiceError

logger = logging.getLogger(__name__)


class ConsoleView(AdminRequiredMixin):
    """
    Base for console pages: admin-only, and `self.client` acts with the
    signed-in admin's token.
    """

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        self.client = backend_client(request)


class RecordObjectMixin:
    """
    Loads the record named by the `pk` URL kwarg before dispatch.
    A failed load flashes `load_error_message` and returns to `list_url_name`.
    """

    load_error_message = "Could not load data."
    list_url_name = ""

    def load_object(self, pk):
        raise NotImplementedError

    def dispatch(self, request, *args, **kwargs):
        try:
            self.object = self.load_object(kwargs["pk"])
        except RecordServiceError as exc:
            logger.warning(
                "Console record load failed: %s",
                exc.message,
                extra={"pk": kwargs.get("pk"), "status": exc.status},
            )
            messages.error(request, self.load_error_message)
            return redirect(self.list_url_name)
        return super().dispatch(request, *args, **kwargs)
