# shopfront/settings/__init__.py
"""
PATH: shopfront/settings/__init__.py

Settings package entrypoint.

We intentionally do NOT import dev/prod here to avoid accidental environment coupling.
Use DJANGO_SETTINGS_MODULE to select:
- shopfront.settings.dev   (local development)
- shopfront.settings.prod  (production)
- shopfront.settings.test  (test runs, in-memory record service)
"""
