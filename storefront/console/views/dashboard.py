# console/views/dashboard.py

from __future__ import annotations

import logging

from django.views.generic import TemplateView

from console.services.dashboard import build_dashboard
from console.views.base import ConsoleView
from records.exceptions import RecordServiceError

logger = logging.getLogger(__name__)

DASHBOARD_FAILED = "Failed to load dashboard data."


class DashboardView(ConsoleView, TemplateView):
    template_name = "console/dashboard.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            context["stats"] = build_dashboard(self.client)
        except RecordServiceError as exc:
            logger.warning("Dashboard stats failed: %s", exc.message, extra={"status": exc.status})
            context["stats"] = None
            context["error"] = DASHBOARD_FAILED
        return context
