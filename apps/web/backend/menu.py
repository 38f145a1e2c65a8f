"""Menu API functions - public menu browsing and the admin item list."""

from aperture_schemas import MenuItem, NormalizedMenuItem

from apps.web.backend.client import BackendClient, BackendSession
from apps.web.menu.categories import available_items, capitalize, normalize_menu_item


async def fetch_menu_items(client: BackendClient) -> list[NormalizedMenuItem]:
    """Fetch the public menu: available items only, normalized for display."""
    items = await client.request(
        "GET",
        client.endpoints.menu_all,
        "fetch menu items",
        list[MenuItem],
    )
    return available_items(items)


async def fetch_menu_items_by_category(
    client: BackendClient, category: str
) -> list[NormalizedMenuItem]:
    """
    Fetch available items for one category.

    The backend stores categories capitalized ("mains" is queried as "Mains").
    """
    items = await client.request(
        "GET",
        client.endpoints.menu_all,
        f"fetch menu items for category: {category}",
        list[MenuItem],
        params={"category": capitalize(category)},
    )
    return available_items(items)


async def fetch_categories(client: BackendClient) -> list[str]:
    """Distinct categories of the public menu, in first-seen order."""
    items = await fetch_menu_items(client)
    return list(dict.fromkeys(item.category for item in items))


async def fetch_admin_menu_items(
    client: BackendClient, session: BackendSession
) -> list[NormalizedMenuItem]:
    """Fetch every menu item, unavailable ones included (admin only)."""
    items = await client.request(
        "GET",
        client.endpoints.menu_admin,
        "fetch menu items",
        list[MenuItem],
        session=session,
    )
    return [normalize_menu_item(item) for item in items]
