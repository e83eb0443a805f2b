# catalog/services/cart.py

"""
CART INTENT

The storefront does not place orders. Adding to cart records the chosen
quantity per product in the visitor's session so the header can show a
count; quantities never exceed the product's stock.
"""

from __future__ import annotations

import logging

from catalog.entities import Product
from catalog.services.products import quantity_choices

logger = logging.getLogger(__name__)

CART_SESSION_KEY = "cart"


class CartError(ValueError):
    """Raised when a cart intent cannot be recorded."""


def add_to_cart_intent(session, product: Product, quantity: int) -> int:
    if not product.in_stock:
        raise CartError(f"{product.name} is out of stock.")

    if quantity not in quantity_choices(product.stock):
        raise CartError("Please choose a valid quantity.")

    cart = dict(session.get(CART_SESSION_KEY) or {})
    total = min(int(cart.get(product.id, 0)) + quantity, product.stock)
    cart[product.id] = total
    session[CART_SESSION_KEY] = cart

    logger.info(
        "Added %s of %s to cart",
        quantity,
        product.name,
        extra={"product_id": product.id, "cart_quantity": total},
    )
    return total


def cart_count(session) -> int:
    cart = session.get(CART_SESSION_KEY) or {}
    return sum(int(qty or 0) for qty in cart.values())
