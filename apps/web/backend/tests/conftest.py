"""Shared fixtures for backend API tests."""

from datetime import UTC, datetime

import pytest

from apps.web.backend import (
    BackendClient,
    BackendSession,
    BackendSettings,
    SessionExpiredEvent,
    SessionExpirySignal,
)

BASE_URL = "https://api.aperture.test"


@pytest.fixture
def settings() -> BackendSettings:
    """Settings pointing at a fake backend."""
    return BackendSettings(api_base_url=BASE_URL)


@pytest.fixture
def signal() -> SessionExpirySignal:
    """A fresh session expiry signal."""
    return SessionExpirySignal()


@pytest.fixture
def expired_events(signal: SessionExpirySignal) -> list[SessionExpiredEvent]:
    """Events received by a listener connected to ``signal``."""
    events: list[SessionExpiredEvent] = []
    signal.connect(events.append)
    return events


@pytest.fixture
def client(settings: BackendSettings, signal: SessionExpirySignal) -> BackendClient:
    """Backend client wired to the test signal."""
    return BackendClient(settings=settings, session_expired=signal)


@pytest.fixture
def session() -> BackendSession:
    """A signed-in member's session."""
    return BackendSession(
        access_token="member-token-abc", user_email="ana@example.com"
    )


@pytest.fixture
def order_response() -> dict:
    """Sample order as the backend returns it."""
    return {
        "id": 42,
        "userId": "user-123",
        "guestEmail": None,
        "guestPhone": None,
        "guestName": None,
        "orderType": "TAKEAWAY",
        "status": "PENDING",
        "paymentStatus": "PENDING",
        "paymentMethod": "CARD",
        "totalAmount": 31.9,
        "deliveryAddress": None,
        "reservationId": None,
        "driverId": None,
        "notes": "Extra napkins",
        "estimatedReadyTime": None,
        "actualDeliveryTime": None,
        "orderItems": [
            {
                "id": 1,
                "menuItemId": "item-margherita",
                "menuItemName": "Margherita",
                "quantity": 2,
                "unitPrice": 14.5,
                "subtotal": 29.0,
                "notes": None,
            }
        ],
        "createdAt": datetime(2026, 3, 1, 18, 30, tzinfo=UTC).isoformat(),
        "updatedAt": datetime(2026, 3, 1, 18, 30, tzinfo=UTC).isoformat(),
    }


@pytest.fixture
def table_response() -> list[dict]:
    """Sample table list."""
    return [
        {
            "id": 1,
            "tableNumber": "T1",
            "capacity": 4,
            "minCapacity": 2,
            "status": "AVAILABLE",
            "description": "Window seat",
            "isActive": True,
            "createdAt": "2026-01-01T10:00:00Z",
            "updatedAt": "2026-01-01T10:00:00Z",
        },
        {
            "id": 2,
            "tableNumber": "T2",
            "capacity": 8,
            "minCapacity": 4,
            "status": "RESERVED",
            "description": None,
            "isActive": True,
            "createdAt": "2026-01-01T10:00:00Z",
            "updatedAt": "2026-01-01T10:00:00Z",
        },
    ]
