# accounts/apps.py

"""
ACCOUNTS APP CONFIG

Storefront authentication against the record service `users` collection:
- Login / register / logout pages
- Session-held auth state (token + user record)
- Bearer-token auth for the JSON API
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Accounts"
