# console/templatetags/console_tags.py

from django import template

from console.menus import MENU_GAP_PX, MENU_WIDTH_PX, row_actions, sidebar_links

register = template.Library()


@register.inclusion_tag("console/partials/sidebar.html", takes_context=True)
def console_sidebar(context):
    request = context.get("request")
    return {"links": sidebar_links(request.path if request else "")}


@register.inclusion_tag("console/partials/row_menu.html")
def row_menu(kind, record_id):
    return {
        "actions": row_actions(kind, record_id),
        "menu_id": f"menu-{kind}-{record_id}",
        "menu_width": MENU_WIDTH_PX,
        "menu_gap": MENU_GAP_PX,
    }
