"""Aperture Schemas - Pydantic models for the restaurant backend contracts."""

from aperture_schemas.auth import (
    AuthMeResponse,
    AuthResponse,
    ConfirmEmailRequest,
    LoginRequest,
    RegisterRequest,
    ResendCodeRequest,
)
from aperture_schemas.base import ApiModel
from aperture_schemas.menu import CategoryOption, MenuItem, NormalizedMenuItem
from aperture_schemas.order import (
    CreateMemberOrderRequest,
    CreateOrderItemRequest,
    CreatePreOrderRequest,
    Order,
    OrderItem,
    OrderStatus,
    OrderType,
    PaymentMethod,
    PaymentStatus,
    UpdateOrderStatusRequest,
)
from aperture_schemas.profile import UpdateProfileRequest, UserProfile
from aperture_schemas.reservation import (
    AvailabilityResponse,
    AvailableTable,
    CreateReservationRequest,
    ReservationResponse,
    ReservedTable,
    TimeSlot,
    UpdateReservationStatusRequest,
)
from aperture_schemas.table import Table, TableStatus

__all__ = [
    "ApiModel",
    # Auth
    "AuthMeResponse",
    "AuthResponse",
    "ConfirmEmailRequest",
    "LoginRequest",
    "RegisterRequest",
    "ResendCodeRequest",
    # Menu
    "CategoryOption",
    "MenuItem",
    "NormalizedMenuItem",
    # Orders
    "CreateMemberOrderRequest",
    "CreateOrderItemRequest",
    "CreatePreOrderRequest",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderType",
    "PaymentMethod",
    "PaymentStatus",
    "UpdateOrderStatusRequest",
    # Profile
    "UpdateProfileRequest",
    "UserProfile",
    # Reservations
    "AvailabilityResponse",
    "AvailableTable",
    "CreateReservationRequest",
    "ReservationResponse",
    "ReservedTable",
    "TimeSlot",
    "UpdateReservationStatusRequest",
    # Tables
    "Table",
    "TableStatus",
]
