# records/client.py
"""
RECORD SERVICE CLIENT

Thin REST client for the managed record-storage/auth service
(PocketBase-compatible API):

    GET    /api/collections/<c>/records
    GET    /api/collections/<c>/records/<id>
    POST   /api/collections/<c>/records             (JSON or multipart)
    PATCH  /api/collections/<c>/records/<id>        (JSON or multipart)
    DELETE /api/collections/<c>/records/<id>
    POST   /api/collections/<c>/auth-with-password
    POST   /api/collections/<c>/auth-refresh
    GET    /api/files/<collectionId>/<recordId>/<filename>

Every public method is ONE round trip. Failures are raised as
records.exceptions.* (never raw requests errors).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import requests
from django.conf import settings
from django.utils.module_loading import import_string

from records.exceptions import (
    RecordNotFound,
    RecordServiceError,
    RecordServiceUnavailable,
    error_for_status,
)

logger = logging.getLogger(__name__)


def _safe_preview(text: str, limit: int = 300) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + " …(truncated)"


def filter_equals(field_name: str, value: Any) -> str:
    """
    Build `field="value"` with quotes and backslashes escaped,
    so user input (e.g. a URL slug) cannot break out of the literal.
    """
    text = str(value if value is not None else "")
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'{field_name}="{escaped}"'


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


@dataclass
class RecordPage:
    page: int
    per_page: int
    total_items: int
    total_pages: int
    items: list[dict] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict) -> "RecordPage":
        return cls(
            page=int(payload.get("page") or 1),
            per_page=int(payload.get("perPage") or 0),
            total_items=int(payload.get("totalItems") or 0),
            total_pages=int(payload.get("totalPages") or 0),
            items=list(payload.get("items") or []),
        )


class RecordClient:
    """
    One client per caller identity: `token` is the auth token of the
    signed-in user (empty for anonymous/public reads).
    """

    def __init__(self, base_url: str, token: str = "", timeout: float = 10.0, session=None):
        self.base_url = (base_url or "").rstrip("/")
        self.token = token or ""
        self.timeout = timeout
        self.session = session or requests.Session()

    # -----------------------------
    # TRANSPORT
    # -----------------------------
    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = self.token
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict | None = None,
        body: dict | None = None,
        files: dict | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        kwargs: dict[str, Any] = {
            "params": {k: v for k, v in (params or {}).items() if v not in (None, "")},
            "headers": self._headers(),
            "timeout": self.timeout,
        }

        if files:
            # multipart: every field travels as text
            kwargs["data"] = {k: _form_value(v) for k, v in (body or {}).items()}
            kwargs["files"] = {
                name: (
                    getattr(upload, "name", name) or name,
                    upload,
                    getattr(upload, "content_type", None) or "application/octet-stream",
                )
                for name, upload in files.items()
            }
        elif body is not None:
            kwargs["json"] = body

        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.Timeout as exc:
            logger.warning("Record service timeout", extra={"method": method, "path": path})
            raise RecordServiceUnavailable(f"Record service timed out: {exc}") from exc
        except requests.RequestException as exc:
            logger.warning("Record service unreachable", extra={"method": method, "path": path})
            raise RecordServiceUnavailable(f"Record service unreachable: {exc}") from exc

        if resp.status_code == 204:
            return {}

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code >= 400:
            error = error_for_status(
                resp.status_code, payload, fallback=_safe_preview(resp.text)
            )
            logger.warning(
                "Record service rejected request: %s",
                error.message,
                extra={"method": method, "path": path, "status": resp.status_code},
            )
            raise error

        if not isinstance(payload, dict):
            raise RecordServiceUnavailable(
                f"Record service returned non-JSON: {_safe_preview(resp.text)}",
                status=resp.status_code,
            )

        return payload

    @staticmethod
    def _records_path(collection: str, record_id: str | None = None) -> str:
        path = f"/api/collections/{quote(collection)}/records"
        if record_id is not None:
            path = f"{path}/{quote(str(record_id))}"
        return path

    # -----------------------------
    # READ
    # -----------------------------
    def get_list(
        self,
        collection: str,
        page: int = 1,
        per_page: int = 30,
        *,
        sort: str | None = None,
        filter: str | None = None,
        expand: str | None = None,
        skip_total: bool = False,
    ) -> RecordPage:
        params = {
            "page": page,
            "perPage": per_page,
            "sort": sort,
            "filter": filter,
            "expand": expand,
            "skipTotal": 1 if skip_total else None,
        }
        payload = self._request("GET", self._records_path(collection), params=params)
        return RecordPage.from_payload(payload)

    def get_full_list(
        self,
        collection: str,
        *,
        sort: str | None = None,
        filter: str | None = None,
        batch: int = 200,
    ) -> list[dict]:
        items: list[dict] = []
        page = 1
        while True:
            result = self.get_list(collection, page, batch, sort=sort, filter=filter)
            items.extend(result.items)
            if not result.items or page >= result.total_pages:
                break
            page += 1
        return items

    def get_one(self, collection: str, record_id: str) -> dict:
        return self._request("GET", self._records_path(collection, record_id))

    def get_first_list_item(self, collection: str, filter: str) -> dict:
        result = self.get_list(collection, 1, 1, filter=filter, skip_total=True)
        if not result.items:
            raise RecordNotFound(
                "The requested resource wasn't found.", payload={"code": 404}
            )
        return result.items[0]

    # -----------------------------
    # WRITE
    # -----------------------------
    def create(self, collection: str, data: dict, files: dict | None = None) -> dict:
        return self._request("POST", self._records_path(collection), body=data, files=files)

    def update(
        self, collection: str, record_id: str, data: dict, files: dict | None = None
    ) -> dict:
        return self._request(
            "PATCH", self._records_path(collection, record_id), body=data, files=files
        )

    def delete(self, collection: str, record_id: str) -> None:
        self._request("DELETE", self._records_path(collection, record_id))

    # -----------------------------
    # AUTH
    # -----------------------------
    def auth_with_password(self, collection: str, identity: str, password: str) -> dict:
        payload = self._request(
            "POST",
            f"/api/collections/{quote(collection)}/auth-with-password",
            body={"identity": identity, "password": password},
        )
        self.token = str(payload.get("token") or "")
        return payload

    def auth_refresh(self, collection: str) -> dict:
        if not self.token:
            raise RecordServiceError("No auth token to refresh", status=401)
        payload = self._request(
            "POST", f"/api/collections/{quote(collection)}/auth-refresh"
        )
        self.token = str(payload.get("token") or self.token)
        return payload

    # -----------------------------
    # MISC
    # -----------------------------
    def health(self) -> dict:
        return self._request("GET", "/api/health")

    def file_url(self, record: dict, filename: str, thumb: str | None = None) -> str:
        if not filename or not record:
            return ""
        collection = record.get("collectionId") or record.get("collectionName") or ""
        url = (
            f"{self.base_url}/api/files/{quote(str(collection))}/"
            f"{quote(str(record.get('id') or ''))}/{quote(str(filename))}"
        )
        if thumb:
            url = f"{url}?thumb={quote(thumb)}"
        return url


def get_client(token: str = "") -> RecordClient:
    """Build the configured client class (settings.RECORD_CLIENT_CLASS)."""
    client_class = import_string(settings.RECORD_CLIENT_CLASS)
    return client_class(
        base_url=settings.POCKETBASE_URL,
        token=token,
        timeout=settings.POCKETBASE_TIMEOUT,
    )
