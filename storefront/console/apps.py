# console/apps.py

"""
CONSOLE APP CONFIG

Admin console for the catalog and user accounts:
- Dashboard with live catalog/user stats
- Product CRUD with image upload
- User management (edit / delete)
"""

from django.apps import AppConfig


class ConsoleConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "console"
    verbose_name = "Admin Console"
