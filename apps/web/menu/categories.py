"""Menu categories - display ordering for the sidebar and category tabs."""

from collections.abc import Iterable

from aperture_schemas import CategoryOption, MenuItem, NormalizedMenuItem

# Lower number = shown first. Unknown categories sort after all of these,
# alphabetically among themselves.
CATEGORY_ORDER: dict[str, int] = {
    "appetizers": 1,
    "starters": 1,
    "soups": 2,
    "salads": 3,
    "mains": 4,
    "entrees": 4,
    "pizza": 5,
    "pasta": 5,
    "seafood": 6,
    "sides": 7,
    "desserts": 8,
    "drinks": 9,
    "beverages": 9,
}

UNKNOWN_CATEGORY_PRIORITY = 100


def capitalize(value: str) -> str:
    """Upper-case the first character only ("mains" -> "Mains", "BBQ" stays)."""
    return value[:1].upper() + value[1:]


def category_sort_key(category: str) -> tuple[int, str]:
    """Priority from CATEGORY_ORDER, then case-sensitive name."""
    return CATEGORY_ORDER.get(category, UNKNOWN_CATEGORY_PRIORITY), category


def get_sorted_categories(
    menu_items: Iterable[NormalizedMenuItem],
) -> list[CategoryOption]:
    """
    One CategoryOption per distinct category, in display order.

    Categories differing only by case are kept apart. The result depends only
    on the set of categories present, not on item order or duplicates.
    """
    categories = sorted({item.category for item in menu_items}, key=category_sort_key)
    return [
        CategoryOption(id=category, name=capitalize(category))
        for category in categories
    ]


def normalize_menu_item(item: MenuItem) -> NormalizedMenuItem:
    """Convert a backend menu item to display form."""
    return NormalizedMenuItem(
        id=item.id,
        name=item.name,
        description=item.description,
        price=item.price,
        image=item.image_url,
        category=item.category.lower(),
        calories=item.calories,
        is_spicy=item.is_spicy,
        is_vegan=item.is_vegan,
        preparation_time=item.preparation_time,
        is_available=item.is_available == "true",
    )


def available_items(items: Iterable[MenuItem]) -> list[NormalizedMenuItem]:
    """Normalize the items the backend marks available; drop the rest."""
    return [
        normalize_menu_item(item) for item in items if item.is_available == "true"
    ]
