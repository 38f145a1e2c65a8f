"""
Backend API configuration.

Values come from the environment (optionally a .env file), read with
django-environ. Run with: APERTURE_API_BASE_URL=https://... python ...
"""

from enum import Enum
from pathlib import Path

import environ  # type: ignore[import-untyped]
from pydantic import BaseModel

DEFAULT_API_BASE_URL = "http://localhost:8080"


class AuthTransport(str, Enum):
    """How session credentials travel to the backend."""

    COOKIE = "cookie"
    HEADER = "header"


class BackendSettings(BaseModel):
    """Settings for talking to the restaurant backend."""

    api_base_url: str = DEFAULT_API_BASE_URL
    auth_transport: AuthTransport = AuthTransport.COOKIE
    session_cookie: str = "access_token"
    # Show SessionExpiredError to the user as well as forcing a logout
    surface_session_expired: bool = True

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> "BackendSettings":
        """
        Build settings from environment variables.

        Args:
            env_file: Optional .env file read before the environment.

        Returns:
            Settings with defaults for anything unset.
        """
        env = environ.Env(
            APERTURE_API_BASE_URL=(str, DEFAULT_API_BASE_URL),
            APERTURE_AUTH_TRANSPORT=(str, AuthTransport.COOKIE.value),
            APERTURE_SESSION_COOKIE=(str, "access_token"),
            APERTURE_SURFACE_SESSION_EXPIRED=(bool, True),
        )
        if env_file is not None and Path(env_file).exists():
            environ.Env.read_env(str(env_file))

        return cls(
            api_base_url=env("APERTURE_API_BASE_URL").rstrip("/"),
            auth_transport=AuthTransport(env("APERTURE_AUTH_TRANSPORT").lower()),
            session_cookie=env("APERTURE_SESSION_COOKIE"),
            surface_session_expired=env("APERTURE_SURFACE_SESSION_EXPIRED"),
        )


class ApiEndpoints:
    """Endpoint-resolution table for the backend's logical operations."""

    def __init__(self, base_url: str = DEFAULT_API_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api{path}"

    # =========================================================================
    # Auth
    # =========================================================================

    @property
    def auth_login(self) -> str:
        return self._url("/auth/login")

    @property
    def auth_register(self) -> str:
        return self._url("/auth/register")

    @property
    def auth_confirm(self) -> str:
        return self._url("/auth/confirm")

    @property
    def auth_resend_code(self) -> str:
        return self._url("/auth/resend-code")

    @property
    def auth_me(self) -> str:
        return self._url("/auth/me")

    @property
    def auth_logout(self) -> str:
        return self._url("/auth/logout")

    # =========================================================================
    # Profile
    # =========================================================================

    @property
    def profile_me(self) -> str:
        return self._url("/profiles/me")

    @property
    def profile_admin_list(self) -> str:
        return self._url("/profiles")

    def profile_by_id(self, user_id: str) -> str:
        return self._url(f"/profiles/user/{user_id}")

    # =========================================================================
    # Menu
    # =========================================================================

    @property
    def menu_all(self) -> str:
        return self._url("/menu/all")

    @property
    def menu_admin(self) -> str:
        return self._url("/menu")

    # =========================================================================
    # Orders
    # =========================================================================

    @property
    def order_member_create(self) -> str:
        return self._url("/orders")

    def order_pre_order(self, reservation_id: str | int) -> str:
        return self._url(f"/orders/pre-order/{reservation_id}")

    @property
    def order_my_orders(self) -> str:
        return self._url("/orders/my-orders")

    def order_by_id(self, order_id: str | int) -> str:
        return self._url(f"/orders/{order_id}")

    @property
    def order_admin(self) -> str:
        return self._url("/orders")

    def order_update_status(self, order_id: str | int) -> str:
        return self._url(f"/orders/{order_id}/status")

    # =========================================================================
    # Tables
    # =========================================================================

    @property
    def table_all(self) -> str:
        return self._url("/tables")

    # =========================================================================
    # Reservations
    # =========================================================================

    @property
    def reservation_availability(self) -> str:
        return self._url("/reservations/availability")

    @property
    def reservation_create(self) -> str:
        return self._url("/reservations")

    @property
    def reservation_create_guest(self) -> str:
        return self._url("/reservations/guest")

    @property
    def reservation_my_reservations(self) -> str:
        return self._url("/reservations/my-reservations")
