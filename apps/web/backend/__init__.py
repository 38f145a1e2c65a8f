"""Backend API layer - wrapped calls to the restaurant backend."""

from apps.web.backend.client import BackendClient, BackendSession
from apps.web.backend.config import ApiEndpoints, AuthTransport, BackendSettings
from apps.web.backend.exceptions import (
    AuthApiError,
    BackendError,
    RequestFailedError,
    SessionExpiredError,
    user_message,
)
from apps.web.backend.signals import SessionExpiredEvent, SessionExpirySignal

__all__ = [
    "ApiEndpoints",
    "AuthApiError",
    "AuthTransport",
    "BackendClient",
    "BackendError",
    "BackendSession",
    "BackendSettings",
    "RequestFailedError",
    "SessionExpiredError",
    "SessionExpiredEvent",
    "SessionExpirySignal",
    "user_message",
]
