# records/apps.py

"""
RECORDS APP CONFIG

Client for the external record-storage/auth service (PocketBase REST surface):
- Collection CRUD (products, users)
- Password auth + token refresh
- File URLs for uploaded images/avatars

No models: the record service owns all data.
"""

from django.apps import AppConfig


class RecordsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "records"
    verbose_name = "Record Service Client"
