# accounts/session.py

"""
SESSION AUTH STATE

The signed-in user's record service token and user record live in the
Django session (signed cookie). This is the single place that reads or
writes that state.
"""

from __future__ import annotations

import logging

from records.client import RecordClient, get_client

from accounts.users import AnonymousShopUser, ShopUser

logger = logging.getLogger(__name__)

SESSION_AUTH_KEY = "record_auth"


def login_session(request, auth_data: dict) -> ShopUser:
    """
    Store `{token, record}` from auth-with-password in the session.
    The session key is cycled to prevent fixation.
    """
    token = str(auth_data.get("token") or "")
    record = dict(auth_data.get("record") or {})

    request.session.cycle_key()
    request.session[SESSION_AUTH_KEY] = {"token": token, "record": record}

    user = ShopUser(record, token=token)
    request.shop_user = user
    logger.info("User signed in", extra={"user_id": user.id, "role": user.role})
    return user


def logout_session(request) -> None:
    user_id = (request.session.get(SESSION_AUTH_KEY) or {}).get("record", {}).get("id")
    request.session.flush()
    request.shop_user = AnonymousShopUser()
    if user_id:
        logger.info("User signed out", extra={"user_id": user_id})


def get_session_user(request):
    state = request.session.get(SESSION_AUTH_KEY) or {}
    token = state.get("token") or ""
    record = state.get("record") or {}
    if not token or not record.get("id"):
        return AnonymousShopUser()
    return ShopUser(record, token=token)


def session_token(request) -> str:
    return str((request.session.get(SESSION_AUTH_KEY) or {}).get("token") or "")


def update_session_record(request, record: dict) -> None:
    """Keep the cached record fresh after the user edits their own account."""
    state = request.session.get(SESSION_AUTH_KEY)
    if not state or (state.get("record") or {}).get("id") != record.get("id"):
        return
    state["record"] = dict(record)
    request.session[SESSION_AUTH_KEY] = state


def backend_client(request) -> RecordClient:
    """Record client acting as the signed-in user (anonymous if none)."""
    return get_client(token=session_token(request))
