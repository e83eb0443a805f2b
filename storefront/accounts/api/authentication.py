# accounts/api/authentication.py

"""
BEARER TOKEN AUTHENTICATION

    Authorization: Bearer <record service token>

The token is validated by one auth-refresh round trip; the returned
record becomes request.user (ShopUser) and the token becomes request.auth,
so downstream record calls act as the caller.
"""

from __future__ import annotations

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from accounts.users import ShopUser
from records.client import get_client
from records.exceptions import RecordPermissionDenied, RecordValidationError

USERS = "users"


class BackendTokenAuthentication(BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        parts = get_authorization_header(request).split()

        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None

        if len(parts) != 2:
            raise exceptions.AuthenticationFailed("Invalid token header.")

        try:
            token = parts[1].decode()
        except UnicodeError as exc:
            raise exceptions.AuthenticationFailed("Invalid token header.") from exc

        client = get_client(token=token)
        try:
            auth_data = client.auth_refresh(USERS)
        except (RecordPermissionDenied, RecordValidationError) as exc:
            raise exceptions.AuthenticationFailed("Invalid or expired token.") from exc

        return ShopUser(auth_data.get("record") or {}, token=token), token

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
