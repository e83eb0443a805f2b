# console/menus.py

"""
CONSOLE NAVIGATION + ROW ACTION MENUS

Sidebar: a link is active when the current path starts with its href.

Row action menus are rendered in a body-level layer so table overflow
never clips them. The menu's right edge lines up with the trigger button
and it opens MENU_GAP_PX below it. static/js/action_menu.js applies the
same arithmetic in the browser.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.urls import reverse

MENU_WIDTH_PX = 192
MENU_GAP_PX = 5

SIDEBAR_LINKS = (
    ("Dashboard", "console:dashboard", "dashboard"),
    ("Products", "console:product-list", "shopping-bag"),
    ("Users", "console:user-list", "users"),
)


@dataclass(frozen=True)
class Rect:
    """Viewport-relative box of the trigger button (getBoundingClientRect)."""

    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class MenuPosition:
    top: float
    left: float


def anchor_menu(
    rect: Rect,
    scroll_x: float,
    scroll_y: float,
    width: float = MENU_WIDTH_PX,
    gap: float = MENU_GAP_PX,
) -> MenuPosition:
    """Document coordinates of the menu for a trigger at `rect`."""
    return MenuPosition(
        top=rect.bottom + scroll_y + gap,
        left=rect.right + scroll_x - width,
    )


def sidebar_links(path: str) -> list[dict]:
    links = []
    for name, url_name, icon in SIDEBAR_LINKS:
        href = reverse(url_name)
        links.append(
            {
                "name": name,
                "href": href,
                "icon": icon,
                "active": (path or "").startswith(href),
            }
        )
    return links


def row_actions(kind: str, record_id: str) -> list[dict]:
    """Edit / Delete entries for a product or user row."""
    return [
        {
            "label": "Edit",
            "url": reverse(f"console:{kind}-edit", kwargs={"pk": record_id}),
            "danger": False,
        },
        {
            "label": "Delete",
            "url": reverse(f"console:{kind}-delete", kwargs={"pk": record_id}),
            "danger": True,
        },
    ]
