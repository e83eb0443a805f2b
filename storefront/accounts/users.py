# accounts/users.py

"""
SHOP USER

Request-level identity built from a `users` record returned by the
record service. There is no local user table.
"""

from __future__ import annotations

from accounts.roles import CONSOLE_ROLES, ROLE_USER


class ShopUser:
    is_authenticated = True
    is_anonymous = False

    def __init__(self, record: dict, token: str = ""):
        self.record = dict(record or {})
        self.token = token or ""

    @property
    def id(self) -> str:
        return str(self.record.get("id") or "")

    @property
    def pk(self) -> str:
        return self.id

    @property
    def email(self) -> str:
        return str(self.record.get("email") or "")

    @property
    def firstname(self) -> str:
        return str(self.record.get("firstname") or "")

    @property
    def lastname(self) -> str:
        return str(self.record.get("lastname") or "")

    @property
    def role(self) -> str:
        return str(self.record.get("role") or ROLE_USER)

    @property
    def avatar(self) -> str:
        return str(self.record.get("avatar") or "")

    @property
    def verified(self) -> bool:
        return bool(self.record.get("verified"))

    @property
    def created(self) -> str:
        return str(self.record.get("created") or "")

    @property
    def is_admin(self) -> bool:
        return self.role in CONSOLE_ROLES

    @property
    def display_name(self) -> str:
        full_name = f"{self.firstname} {self.lastname}".strip()
        return full_name or "N/A"

    def avatar_url(self, client, thumb: str | None = None) -> str:
        return client.file_url(self.record, self.avatar, thumb=thumb)

    def __str__(self):
        return self.email or self.id

    def __repr__(self):
        return f"<ShopUser {self.email or self.id} ({self.role})>"


class AnonymousShopUser:
    id = ""
    pk = None
    email = ""
    role = ""
    token = ""
    is_authenticated = False
    is_anonymous = True
    is_admin = False

    def __str__(self):
        return "AnonymousShopUser"

