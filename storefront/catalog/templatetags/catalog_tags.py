# catalog/templatetags/catalog_tags.py

from __future__ import annotations

from datetime import datetime

import nh3
from django import template
from django.utils.safestring import mark_safe

from catalog.services.products import format_price

register = template.Library()

NO_DESCRIPTION = "No description available."

# Formatting markup an admin may use in a product description.
DESCRIPTION_TAGS = {
    "a", "b", "blockquote", "br", "code", "em", "h1", "h2", "h3", "h4", "h5", "h6",
    "hr", "i", "img", "li", "ol", "p", "pre", "s", "small", "span", "strong",
    "sub", "sup", "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
}
DESCRIPTION_ATTRIBUTES = {
    "a": {"href", "title"},
    "img": {"src", "alt", "title", "width", "height"},
    "td": {"colspan", "rowspan"},
    "th": {"colspan", "rowspan"},
}
DESCRIPTION_URL_SCHEMES = {"http", "https", "mailto"}


@register.filter
def price(value):
    return format_price(value)


@register.filter
def description_html(value):
    """
    Product descriptions are admin-authored HTML. Only the formatting
    allowlist above survives; scripts, event handlers and other URL schemes
    are dropped.
    """
    text = str(value or "").strip()
    if not text:
        return NO_DESCRIPTION
    cleaned = nh3.clean(
        text,
        tags=DESCRIPTION_TAGS,
        attributes=DESCRIPTION_ATTRIBUTES,
        url_schemes=DESCRIPTION_URL_SCHEMES,
    )
    return mark_safe(cleaned)


@register.filter
def record_date(value):
    """'2024-01-05 10:00:00.000Z' -> 'Jan 5, 2024' (unparseable values pass through)."""
    text = str(value or "").strip()
    if not text:
        return ""
    try:
        moment = datetime.fromisoformat(text.replace("Z", "+00:00").replace(" ", "T", 1))
    except ValueError:
        return text
    return f"{moment:%b} {moment.day}, {moment.year}"
