"""Backend client - the wrapped-call contract shared by every API function."""

import logging
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Any, TypeVar

import httpx
from aperture_schemas import ApiModel
from pydantic import BaseModel, TypeAdapter, ValidationError

from apps.web.backend.config import ApiEndpoints, AuthTransport, BackendSettings
from apps.web.backend.exceptions import RequestFailedError, SessionExpiredError
from apps.web.backend.signals import SessionExpiredEvent, SessionExpirySignal

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _refusing_cookie_jar() -> CookieJar:
    """Cookie jar that stores nothing; BackendSession carries the credentials."""
    return CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))


class BackendSession(BaseModel):
    """Authenticated session handle passed into every credentialed call."""

    access_token: str
    user_email: str | None = None


class BackendClient:
    """
    Client for the restaurant backend API.

    Resource functions (orders, tables, menu, ...) go through ``request``,
    which attaches session credentials, parses the JSON response and maps
    failures onto the error taxonomy:

    - 401: fires the session expiry signal, then raises SessionExpiredError
    - other non-2xx: raises RequestFailedError with the server message or a
      fallback naming the operation and status code

    Calls are one-shot: no retries and no caching.
    """

    def __init__(
        self,
        settings: BackendSettings | None = None,
        session_expired: SessionExpirySignal | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the backend client.

        Args:
            settings: Backend settings; read from the environment when omitted.
            session_expired: Signal fired on 401. Pass the application's
                shared instance so the auth layer hears about it.
            http_client: Optional HTTP client for dependency injection (testing).
        """
        self.settings = settings or BackendSettings.from_env()
        self.endpoints = ApiEndpoints(self.settings.api_base_url)
        self.session_expired = session_expired or SessionExpirySignal()
        self._client = http_client or httpx.AsyncClient(
            cookies=_refusing_cookie_jar()
        )
        self._owns_client = http_client is None

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    def _credential_headers(self, session: BackendSession | None) -> dict[str, str]:
        """Headers carrying the session, in the configured transport."""
        if session is None:
            return {}
        if self.settings.auth_transport == AuthTransport.HEADER:
            return {"Authorization": f"Bearer {session.access_token}"}
        return {"Cookie": f"{self.settings.session_cookie}={session.access_token}"}

    async def send(
        self,
        method: str,
        url: str,
        *,
        session: BackendSession | None = None,
        payload: ApiModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Issue a single request without interpreting the response.

        Args:
            method: HTTP method (GET, POST, ...)
            url: Fully resolved endpoint URL
            session: Session whose credentials are attached, if any
            payload: JSON body for writes
            params: Query string parameters

        Returns:
            The raw HTTP response.

        Raises:
            httpx.RequestError: On connectivity or transport failure.
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._credential_headers(session),
        }
        body = payload.to_payload() if isinstance(payload, ApiModel) else payload

        logger.debug("%s %s", method, url)
        try:
            return await self._client.request(
                method, url, headers=headers, json=body, params=params
            )
        except httpx.RequestError as e:
            logger.warning("Backend request %s %s failed: %s", method, url, e)
            raise

    async def request(
        self,
        method: str,
        url: str,
        operation: str,
        response_type: type[T] | Any,
        *,
        session: BackendSession | None = None,
        payload: ApiModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> T:
        """
        Make a wrapped call and return the validated response body.

        Args:
            method: HTTP method.
            url: Fully resolved endpoint URL.
            operation: Human-readable operation name used in error messages,
                e.g. "create order".
            response_type: Model (or ``list[Model]``) the body is validated as.
            session: Session whose credentials are attached, if any.
            payload: JSON body for writes.
            params: Query string parameters.

        Returns:
            The response body validated as ``response_type``.

        Raises:
            SessionExpiredError: On HTTP 401, after the signal has fired.
            RequestFailedError: On any other non-2xx status, or a 2xx body
                that is not JSON or does not match ``response_type``.
        """
        response = await self.send(
            method, url, session=session, payload=payload, params=params
        )
        self.raise_for_status(response, operation)
        try:
            return TypeAdapter(response_type).validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(
                "Backend call to %s returned an unreadable body: %s", operation, e
            )
            raise RequestFailedError(
                f"Failed to {operation}: invalid response",
                operation=operation,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    def raise_for_status(self, response: httpx.Response, operation: str) -> None:
        """Map a non-2xx response onto SessionExpiredError / RequestFailedError."""
        if response.is_success:
            return

        if response.status_code == 401:
            self.session_expired.trigger(
                SessionExpiredEvent(operation=operation, url=str(response.url))
            )
            raise SessionExpiredError(
                operation=operation,
                surface=self.settings.surface_session_expired,
            )

        message = error_message(response) or (
            f"Failed to {operation}: {response.status_code}"
        )
        logger.warning(
            "Backend call to %s failed with %s: %s",
            operation,
            response.status_code,
            message,
        )
        raise RequestFailedError(
            message,
            operation=operation,
            status_code=response.status_code,
            response_body=response.text,
        )


def error_message(response: httpx.Response) -> str | None:
    """Best-effort ``message`` from a JSON error body; None if unavailable."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    return str(message) if message else None
