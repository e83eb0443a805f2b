from django.test import SimpleTestCase

from console.menus import (
    MENU_GAP_PX,
    MENU_WIDTH_PX,
    MenuPosition,
    Rect,
    anchor_menu,
    row_actions,
    sidebar_links,
)


class AnchorMenuTests(SimpleTestCase):
    """
    GUARANTEES:
    - Menu opens just below the trigger (gap included)
    - Menu right edge lines up with the trigger right edge
    - Page scroll offsets are applied
    """

    def test_defaults(self):
        self.assertEqual(MENU_WIDTH_PX, 192)
        self.assertEqual(MENU_GAP_PX, 5)

    def test_anchor_below_and_right_aligned(self):
        rect = Rect(top=100, right=500, bottom=132, left=468)

        self.assertEqual(anchor_menu(rect, 0, 0), MenuPosition(top=137, left=308))

    def test_scroll_offsets(self):
        rect = Rect(top=100, right=500, bottom=132, left=468)

        position = anchor_menu(rect, scroll_x=20, scroll_y=400)

        self.assertEqual(position.top, 132 + 400 + 5)
        self.assertEqual(position.left, 500 + 20 - 192)

    def test_custom_width_and_gap(self):
        rect = Rect(top=0, right=300, bottom=10, left=280)
        self.assertEqual(anchor_menu(rect, 0, 0, width=100, gap=0), MenuPosition(top=10, left=200))


class NavigationTests(SimpleTestCase):
    def test_active_link_uses_prefix(self):
        links = sidebar_links("/console/products/abc/edit/")

        self.assertEqual([l["name"] for l in links], ["Dashboard", "Products", "Users"])
        self.assertEqual([l["active"] for l in links], [False, True, False])

    def test_row_actions(self):
        actions = row_actions("product", "p1")

        self.assertEqual([a["label"] for a in actions], ["Edit", "Delete"])
        self.assertEqual(actions[0]["url"], "/console/products/p1/edit/")
        self.assertEqual(actions[1]["url"], "/console/products/p1/delete/")
        self.assertTrue(actions[1]["danger"])
