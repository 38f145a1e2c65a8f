"""Menu display helpers."""

from apps.web.menu.categories import (
    CATEGORY_ORDER,
    UNKNOWN_CATEGORY_PRIORITY,
    available_items,
    capitalize,
    get_sorted_categories,
    normalize_menu_item,
)

__all__ = [
    "CATEGORY_ORDER",
    "UNKNOWN_CATEGORY_PRIORITY",
    "available_items",
    "capitalize",
    "get_sorted_categories",
    "normalize_menu_item",
]
