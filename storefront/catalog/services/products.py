# catalog/services/products.py

"""
PRODUCT SERVICE

One function per record service round trip on the `products` collection,
plus the pure helpers the pages share (slug, price, quantity choices).

Storefront reads (featured list, product by slug) never raise: a failed
call is logged and the page renders its empty / not-found state.
Admin operations raise records.exceptions.* for the console to report.
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings

from catalog.entities import Product
from records.client import filter_equals
from records.exceptions import RecordNotFound, RecordServiceError

logger = logging.getLogger(__name__)

PRODUCTS = "products"
MAX_QUANTITY_PER_ORDER = 10

_NON_SLUG_CHARS = re.compile(r"[^\w-]+", re.ASCII)


# -----------------------------
# PURE HELPERS
# -----------------------------
def create_slug(name: str) -> str:
    """
    URL-friendly slug: lower-case, spaces become hyphens, every other
    non-word character is dropped ("Red Shoes!" -> "red-shoes").
    """
    return _NON_SLUG_CHARS.sub("", (name or "").lower().replace(" ", "-"))


def format_price(amount) -> str:
    """USD display format: 1234.5 -> "$1,234.50"."""
    value = Decimal(str(amount if amount not in (None, "") else 0))
    value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def quantity_choices(stock: int) -> list[int]:
    """1..min(stock, 10); empty when nothing is in stock."""
    return list(range(1, min(int(stock or 0), MAX_QUANTITY_PER_ORDER) + 1))


def product_payload(data: dict) -> dict:
    """Form/serializer data -> record fields (JSON-safe)."""
    payload = {}
    for key in ("name", "slug", "description"):
        if key in data:
            payload[key] = (data.get(key) or "").strip()
    if "price" in data and data["price"] is not None:
        payload["price"] = float(data["price"])
    if "stock" in data and data["stock"] is not None:
        payload["stock"] = int(data["stock"])
    if payload.get("slug"):
        payload["slug"] = create_slug(payload["slug"])
    return payload


# -----------------------------
# STOREFRONT READS
# -----------------------------
def list_featured_products(client, limit: int | None = None) -> list[Product]:
    limit = limit or settings.FEATURED_PRODUCTS_LIMIT
    try:
        page = client.get_list(PRODUCTS, 1, limit, sort="-created")
    except RecordServiceError as exc:
        logger.error(
            "Failed to fetch featured products (%s). Check that the record service is "
            "running at %s and that the '%s' collection allows public List/View.",
            exc.message,
            settings.POCKETBASE_URL,
            PRODUCTS,
            extra={"status": exc.status},
        )
        return []
    return [Product.from_record(item, client) for item in page.items]


def get_product_by_slug(client, slug: str) -> Product | None:
    try:
        record = client.get_first_list_item(PRODUCTS, filter_equals("slug", slug))
    except RecordNotFound:
        logger.info("Product with slug %r not found", slug)
        return None
    except RecordServiceError as exc:
        logger.warning("Product lookup for slug %r failed: %s", slug, exc.message)
        return None
    return Product.from_record(record, client)


# -----------------------------
# ADMIN OPERATIONS
# -----------------------------
def list_all_products(client) -> list[Product]:
    records = client.get_full_list(PRODUCTS, sort="-created")
    return [Product.from_record(item, client) for item in records]


def count_products(client) -> int:
    return client.get_list(PRODUCTS, 1, 1).total_items


def get_product(client, product_id: str) -> Product:
    return Product.from_record(client.get_one(PRODUCTS, product_id), client)


def create_product(client, data: dict, image, created_by: str) -> Product:
    payload = product_payload(data)
    payload["created_by"] = created_by
    record = client.create(PRODUCTS, payload, files={"image": image} if image else None)
    logger.info("Product created", extra={"product_id": record.get("id"), "user_id": created_by})
    return Product.from_record(record, client)


def update_product(client, product_id: str, data: dict, image=None) -> Product:
    payload = product_payload(data)
    record = client.update(
        PRODUCTS, product_id, payload, files={"image": image} if image else None
    )
    logger.info("Product updated", extra={"product_id": product_id})
    return Product.from_record(record, client)


def delete_product(client, product_id: str) -> None:
    client.delete(PRODUCTS, product_id)
    logger.info("Product deleted", extra={"product_id": product_id})
