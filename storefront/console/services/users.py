# console/services/users.py

"""
USER MANAGEMENT (admin)

Every call needs an admin token on the client; the `users` collection
rules reject anyone else.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from accounts.users import ShopUser

logger = logging.getLogger(__name__)

USERS = "users"
AVATAR_PLACEHOLDER_URL = "https://via.placeholder.com/40/e5e7eb/4b5563.png?text=?"

EDITABLE_FIELDS = (
    "firstname",
    "lastname",
    "email",
    "phone_no",
    "role",
    "credit",
    "address",
    "verify_phone",
    "verified",
)


def user_payload(data: dict) -> dict:
    payload = {}
    for key in EDITABLE_FIELDS:
        if key not in data:
            continue
        value = data[key]
        if key == "credit":
            value = float(value if value not in (None, "") else Decimal("0"))
        elif key in ("verify_phone", "verified"):
            value = bool(value)
        elif value is None:
            value = ""
        payload[key] = value
    return payload


def list_users(client) -> list[ShopUser]:
    return [ShopUser(record) for record in client.get_full_list(USERS, sort="-created")]


def count_users(client) -> int:
    return client.get_list(USERS, 1, 1).total_items


def get_user(client, user_id: str) -> ShopUser:
    return ShopUser(client.get_one(USERS, user_id))


def update_user(client, user_id: str, data: dict, avatar=None) -> ShopUser:
    record = client.update(
        USERS, user_id, user_payload(data), files={"avatar": avatar} if avatar else None
    )
    logger.info("User updated", extra={"user_id": user_id})
    return ShopUser(record)


def delete_user(client, user_id: str) -> None:
    client.delete(USERS, user_id)
    logger.info("User deleted", extra={"user_id": user_id})


def avatar_url(client, user: ShopUser, thumb: str | None = None) -> str:
    return user.avatar_url(client, thumb=thumb) or AVATAR_PLACEHOLDER_URL
