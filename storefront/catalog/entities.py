# catalog/entities.py

"""
PRODUCT (record view)

Typed, read-only view of a `products` record. The record service owns
validation; parsing here is lenient so one bad record never breaks a page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

PLACEHOLDER_IMAGE_URL = "https://placehold.co/400x400/f3f4f6/9ca3af?text=Image+Not+Found"


def _to_decimal(value) -> Decimal:
    try:
        return Decimal(str(value if value not in (None, "") else 0))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def _to_int(value) -> int:
    try:
        return int(float(value or 0))
    except (ValueError, TypeError):
        return 0


@dataclass
class Product:
    id: str
    name: str
    slug: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    stock: int = 0
    image: str = ""
    created_by: str = ""
    collection_id: str = ""
    collection_name: str = "products"
    created: str = ""
    updated: str = ""
    image_url: str = ""
    record: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_record(cls, record: dict, client=None) -> "Product":
        record = dict(record or {})
        image = str(record.get("image") or "")
        return cls(
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
            slug=str(record.get("slug") or ""),
            description=str(record.get("description") or ""),
            price=_to_decimal(record.get("price")),
            stock=_to_int(record.get("stock")),
            image=image,
            created_by=str(record.get("created_by") or ""),
            collection_id=str(record.get("collectionId") or ""),
            collection_name=str(record.get("collectionName") or "products"),
            created=str(record.get("created") or ""),
            updated=str(record.get("updated") or ""),
            image_url=client.file_url(record, image) if client is not None else "",
            record=record,
        )

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def display_image_url(self) -> str:
        return self.image_url or PLACEHOLDER_IMAGE_URL
