# records/testing.py
"""
IN-MEMORY RECORD SERVICE

Drop-in replacement for RecordClient used by shopfront.settings.test:
    RECORD_CLIENT_CLASS = "records.testing.InMemoryRecordClient"

Mirrors the collection rules the storefront relies on:
- products: public list/view; create/update/delete need an admin token
- users: anyone may register; list/view/update/delete need an admin token
  (or the owner's token for view/update)
- auth-with-password / auth-refresh with opaque tokens

Only `field="value"` filters and `-field` / `field` sorts are understood.
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from records.client import RecordClient, RecordPage
from records.exceptions import (
    RecordNotFound,
    RecordPermissionDenied,
    RecordValidationError,
)

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)
_FILTER_RE = re.compile(r'^\s*(\w+)\s*=\s*"((?:[^"\\]|\\.)*)"\s*$')

_STORE: dict[str, dict[str, dict]] = {}
_PASSWORDS: dict[str, str] = {}
_TOKENS: dict[str, tuple[str, str]] = {}
_CLOCK = {"tick": 0}


def reset_store() -> None:
    _STORE.clear()
    _PASSWORDS.clear()
    _TOKENS.clear()
    _CLOCK["tick"] = 0


def _timestamp() -> str:
    _CLOCK["tick"] += 1
    moment = _EPOCH + timedelta(seconds=_CLOCK["tick"])
    return moment.strftime("%Y-%m-%d %H:%M:%S.000Z")


def _new_id() -> str:
    return uuid.uuid4().hex[:15]


def seed_record(collection: str, **fields) -> dict:
    """Insert a record directly (bypasses rules); returns a copy."""
    now = _timestamp()
    record = {
        "id": fields.pop("id", None) or _new_id(),
        "collectionId": f"pbc_{collection}",
        "collectionName": collection,
        "created": now,
        "updated": now,
    }
    record.update(fields)
    _STORE.setdefault(collection, {})[record["id"]] = record
    return dict(record)


def seed_user(email: str, password: str = "password123", role: str = "user", **fields) -> dict:
    fields.setdefault("firstname", "")
    fields.setdefault("lastname", "")
    fields.setdefault("avatar", "")
    fields.setdefault("verified", False)
    record = seed_record("users", email=email, role=role, **fields)
    _PASSWORDS[record["id"]] = password
    return record


def issue_token(record: dict) -> str:
    token = f"token-{uuid.uuid4().hex}"
    _TOKENS[token] = (record.get("collectionName") or "users", record["id"])
    return token


def stored(collection: str, record_id: str) -> dict | None:
    record = _STORE.get(collection, {}).get(record_id)
    return dict(record) if record else None


def _unescape(value: str) -> str:
    return re.sub(r"\\(.)", r"\1", value)


def _matches(record: dict, expression: str | None) -> bool:
    if not expression:
        return True
    match = _FILTER_RE.match(expression)
    if not match:
        raise RecordValidationError(
            "Something went wrong while processing your request. Invalid filter parameters.",
            payload={"code": 400, "message": "Invalid filter parameters.", "data": {}},
        )
    field_name, value = match.group(1), _unescape(match.group(2))
    return str(record.get(field_name, "")) == value


def _sorted(records: list[dict], sort: str | None) -> list[dict]:
    if not sort:
        return records
    reverse = sort.startswith("-")
    key = sort.lstrip("-+")
    return sorted(records, key=lambda r: str(r.get(key, "")), reverse=reverse)


def _validation_error(field_errors: dict[str, str]) -> RecordValidationError:
    data = {
        name: {"code": "validation_invalid", "message": msg}
        for name, msg in field_errors.items()
    }
    return RecordValidationError(
        "Failed to create record.",
        payload={"code": 400, "message": "Failed to create record.", "data": data},
    )


class InMemoryRecordClient(RecordClient):
    def _auth_record(self) -> dict | None:
        ref = _TOKENS.get(self.token)
        if not ref:
            return None
        collection, record_id = ref
        return _STORE.get(collection, {}).get(record_id)

    def _is_admin(self) -> bool:
        record = self._auth_record()
        return bool(record and record.get("role") == "admin")

    def _require(self, allowed: bool) -> None:
        if allowed:
            return
        if not self.token:
            raise RecordPermissionDenied(
                "The request requires valid record authorization token to be set.",
                status=401,
                payload={"code": 401},
            )
        raise RecordPermissionDenied(
            "Only admins can perform this action.", status=403, payload={"code": 403}
        )

    def _can_read(self, collection: str, record: dict | None = None) -> bool:
        if collection != "users":
            return True
        if self._is_admin():
            return True
        auth = self._auth_record()
        return bool(record and auth and auth["id"] == record["id"])

    def _can_write(self, collection: str, record: dict | None = None) -> bool:
        if self._is_admin():
            return True
        if collection == "users":
            auth = self._auth_record()
            return bool(record and auth and auth["id"] == record["id"])
        return False

    def _lookup(self, collection: str, record_id: str) -> dict:
        record = _STORE.get(collection, {}).get(str(record_id))
        if not record:
            raise RecordNotFound(
                "The requested resource wasn't found.", payload={"code": 404}
            )
        return record

    # -----------------------------
    # READ
    # -----------------------------
    def get_list(
        self,
        collection,
        page=1,
        per_page=30,
        *,
        sort=None,
        filter=None,
        expand=None,
        skip_total=False,
    ) -> RecordPage:
        if collection == "users":
            self._require(self._is_admin())

        records = [r for r in _STORE.get(collection, {}).values() if _matches(r, filter)]
        records = _sorted(records, sort)

        total = len(records)
        per_page = max(int(per_page), 1)
        start = (int(page) - 1) * per_page
        items = [dict(r) for r in records[start:start + per_page]]
        total_pages = (total + per_page - 1) // per_page

        return RecordPage(
            page=int(page),
            per_page=per_page,
            total_items=-1 if skip_total else total,
            total_pages=-1 if skip_total else total_pages,
            items=items,
        )

    def get_one(self, collection, record_id):
        record = self._lookup(collection, record_id)
        if not self._can_read(collection, record):
            # collection rules hide records rather than revealing them
            raise RecordNotFound(
                "The requested resource wasn't found.", payload={"code": 404}
            )
        return dict(record)

    # -----------------------------
    # WRITE
    # -----------------------------
    def _apply_files(self, record: dict, files: dict | None) -> None:
        for name, upload in (files or {}).items():
            filename = getattr(upload, "name", "") or f"{name}.bin"
            record[name] = filename.rsplit("/", 1)[-1]

    def _check_unique(self, collection: str, field_name: str, value: Any, exclude_id=None):
        for other in _STORE.get(collection, {}).values():
            if other["id"] != exclude_id and value and other.get(field_name) == value:
                return False
        return True

    def create(self, collection, data, files=None):
        data = dict(data or {})

        if collection == "users":
            password = str(data.pop("password", "") or "")
            confirm = str(data.pop("passwordConfirm", "") or "")
            email = str(data.get("email") or "").strip()
            errors = {}
            if not email:
                errors["email"] = "Cannot be blank."
            elif not self._check_unique("users", "email", email):
                errors["email"] = "The email is invalid or already in use."
            if len(password) < 8:
                errors["password"] = "Must be at least 8 character(s)."
            elif password != confirm:
                errors["passwordConfirm"] = "Values don't match."
            if errors:
                raise _validation_error(errors)
            data.setdefault("role", "user")
            data.setdefault("verified", False)
            data.setdefault("avatar", "")
            record = seed_user(email=email, password=password, **{
                k: v for k, v in data.items() if k != "email"
            })
        else:
            self._require(self._can_write(collection))
            if collection == "products" and not self._check_unique(
                "products", "slug", data.get("slug")
            ):
                raise _validation_error({"slug": "Value must be unique."})
            record = seed_record(collection, **data)

        stored_record = _STORE[collection][record["id"]]
        self._apply_files(stored_record, files)
        return dict(stored_record)

    def update(self, collection, record_id, data, files=None):
        record = self._lookup(collection, record_id)
        self._require(self._can_write(collection, record))

        data = dict(data or {})
        data.pop("id", None)
        if collection == "products" and "slug" in data and not self._check_unique(
            "products", "slug", data["slug"], exclude_id=record["id"]
        ):
            raise _validation_error({"slug": "Value must be unique."})
        if collection == "users" and "email" in data and not self._check_unique(
            "users", "email", data["email"], exclude_id=record["id"]
        ):
            raise _validation_error({"email": "The email is invalid or already in use."})

        record.update(data)
        self._apply_files(record, files)
        record["updated"] = _timestamp()
        return dict(record)

    def delete(self, collection, record_id):
        record = self._lookup(collection, record_id)
        self._require(self._can_write(collection, record))
        del _STORE[collection][record["id"]]
        _PASSWORDS.pop(record["id"], None)

    # -----------------------------
    # AUTH
    # -----------------------------
    def auth_with_password(self, collection, identity, password):
        identity = (identity or "").strip().lower()
        for record in _STORE.get(collection, {}).values():
            if str(record.get("email", "")).lower() != identity:
                continue
            if _PASSWORDS.get(record["id"]) == password:
                self.token = issue_token(record)
                return {"token": self.token, "record": dict(record)}
            break
        raise RecordValidationError(
            "Failed to authenticate.",
            payload={"code": 400, "message": "Failed to authenticate.", "data": {}},
        )

    def auth_refresh(self, collection):
        record = self._auth_record()
        if not record:
            raise RecordPermissionDenied(
                "The request requires valid record authorization token to be set.",
                status=401,
                payload={"code": 401},
            )
        self.token = issue_token(record)
        return {"token": self.token, "record": dict(record)}

    def health(self):
        return {"code": 200, "message": "API is healthy.", "data": {}}
