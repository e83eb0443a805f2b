# shopfront/settings/test.py
"""
PATH: shopfront/settings/test.py

TEST SETTINGS

- Record service is replaced by the in-memory client (no network in tests)
- Throttling relaxed so API tests never hit 429
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import REST_FRAMEWORK

DEBUG = False
SECRET_KEY = "test-secret-key"
ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

POCKETBASE_URL = "http://records.test"
RECORD_CLIENT_CLASS = "records.testing.InMemoryRecordClient"

FEATURED_PRODUCTS_LIMIT = 8

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": (),
    "DEFAULT_THROTTLE_RATES": {
        "anon": "10000/min",
        "user": "10000/min",
        "public_catalog": "10000/min",
        "auth": "10000/min",
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"null": {"class": "logging.NullHandler"}},
    "root": {"handlers": ["null"], "level": "CRITICAL"},
}
