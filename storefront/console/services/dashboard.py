# console/services/dashboard.py

"""
DASHBOARD STATS

Computed live on every request (no caching):
- product / user totals from the `totalItems` of 1-item pages
- out-of-stock count and inventory value (sum of price x stock)
  from the full product list
- the five most recent products
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from catalog.entities import Product
from catalog.services.products import count_products, list_all_products
from console.services.users import count_users

RECENT_PRODUCTS_LIMIT = 5


@dataclass
class DashboardStats:
    product_count: int = 0
    user_count: int = 0
    out_of_stock_count: int = 0
    inventory_value: Decimal = Decimal("0")
    recent_products: list[Product] = field(default_factory=list)


def inventory_value(products) -> Decimal:
    return sum((p.price * p.stock for p in products), Decimal("0"))


def build_dashboard(client) -> DashboardStats:
    products = list_all_products(client)
    return DashboardStats(
        product_count=count_products(client),
        user_count=count_users(client),
        out_of_stock_count=sum(1 for p in products if not p.in_stock),
        inventory_value=inventory_value(products),
        recent_products=products[:RECENT_PRODUCTS_LIMIT],
    )
