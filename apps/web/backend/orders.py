"""Order API functions - member orders, pre-orders and admin status updates."""

from aperture_schemas import (
    CreateMemberOrderRequest,
    CreatePreOrderRequest,
    Order,
    OrderStatus,
    UpdateOrderStatusRequest,
)

from apps.web.backend.client import BackendClient, BackendSession


async def create_member_order(
    client: BackendClient,
    session: BackendSession,
    order: CreateMemberOrderRequest,
) -> Order:
    """
    Create a new order for a signed-in member.

    Raises:
        SessionExpiredError: If the session is no longer valid.
        RequestFailedError: If the backend rejects the order.
    """
    return await client.request(
        "POST",
        client.endpoints.order_member_create,
        "create order",
        Order,
        session=session,
        payload=order,
    )


async def create_pre_order(
    client: BackendClient,
    session: BackendSession,
    reservation_id: str | int,
    order: CreatePreOrderRequest,
) -> Order:
    """Create a pre-order linked to a reservation."""
    return await client.request(
        "POST",
        client.endpoints.order_pre_order(reservation_id),
        "create pre-order",
        Order,
        session=session,
        payload=order,
    )


async def get_my_orders(client: BackendClient, session: BackendSession) -> list[Order]:
    """Get the current member's orders."""
    return await client.request(
        "GET",
        client.endpoints.order_my_orders,
        "fetch orders",
        list[Order],
        session=session,
    )


async def get_order_by_id(
    client: BackendClient, session: BackendSession, order_id: str | int
) -> Order:
    """Get a specific order by ID."""
    return await client.request(
        "GET",
        client.endpoints.order_by_id(order_id),
        "fetch order",
        Order,
        session=session,
    )


async def get_admin_orders(
    client: BackendClient, session: BackendSession
) -> list[Order]:
    """Get every order (admin only)."""
    return await client.request(
        "GET",
        client.endpoints.order_admin,
        "fetch orders",
        list[Order],
        session=session,
    )


async def update_order_status(
    client: BackendClient,
    session: BackendSession,
    order_id: str | int,
    status: OrderStatus,
) -> Order:
    """Move an order to a new status (admin only)."""
    return await client.request(
        "PATCH",
        client.endpoints.order_update_status(order_id),
        "update order status",
        Order,
        session=session,
        payload=UpdateOrderStatusRequest(status=status),
    )
