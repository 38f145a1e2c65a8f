"""Order schemas - member orders, pre-orders and their line items."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import Field

from aperture_schemas.base import ApiModel

# =============================================================================
# Enums
# =============================================================================


class OrderType(str, Enum):
    """How the order is fulfilled."""

    DINE_IN = "DINE_IN"
    PRE_ORDER = "PRE_ORDER"
    TAKEAWAY = "TAKEAWAY"
    DELIVERY = "DELIVERY"


class OrderStatus(str, Enum):
    """Order lifecycle status."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    READY = "READY"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, Enum):
    """Payment processing status."""

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class PaymentMethod(str, Enum):
    """How the customer pays."""

    CASH = "CASH"
    CARD = "CARD"
    ONLINE = "ONLINE"


# =============================================================================
# Requests
# =============================================================================


class CreateOrderItemRequest(ApiModel):
    """Line item in an order creation request."""

    menu_item_id: str
    quantity: int = Field(default=1, ge=1)
    notes: str | None = None


class CreateMemberOrderRequest(ApiModel):
    """Order placed by a signed-in member."""

    order_type: OrderType
    items: list[CreateOrderItemRequest]
    payment_method: PaymentMethod
    delivery_address: str | None = None
    notes: str | None = None


class CreatePreOrderRequest(ApiModel):
    """Order attached to an existing reservation."""

    items: list[CreateOrderItemRequest]
    payment_method: PaymentMethod
    notes: str | None = None


class UpdateOrderStatusRequest(ApiModel):
    """Admin status change for an order."""

    status: OrderStatus


# =============================================================================
# Responses
# =============================================================================


class OrderItem(ApiModel):
    """Line item on an order returned by the backend."""

    id: int
    menu_item_id: str
    menu_item_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    notes: str | None = None


class Order(ApiModel):
    """An order as returned by the backend."""

    id: int
    user_id: str | None = None
    guest_email: str | None = None
    guest_phone: str | None = None
    guest_name: str | None = None
    order_type: OrderType
    status: OrderStatus
    payment_status: PaymentStatus
    payment_method: PaymentMethod
    total_amount: Decimal
    delivery_address: str | None = None
    reservation_id: str | None = None
    driver_id: str | None = None
    notes: str | None = None
    estimated_ready_time: datetime | None = None
    actual_delivery_time: datetime | None = None
    order_items: list[OrderItem] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
