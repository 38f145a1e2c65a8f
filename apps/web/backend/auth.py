"""
Auth API functions - login, registration, email confirmation and logout.

These are not wrapped calls: a 401 from the login endpoint means bad
credentials, not an expired session, so failures raise AuthApiError and the
session expiry signal never fires here.
"""

import logging

import httpx
from aperture_schemas import (
    AuthMeResponse,
    AuthResponse,
    ConfirmEmailRequest,
    LoginRequest,
    RegisterRequest,
    ResendCodeRequest,
)

from apps.web.backend.client import BackendClient, BackendSession, error_message
from apps.web.backend.exceptions import AuthApiError

logger = logging.getLogger(__name__)


def _raise_for_auth_status(
    response: httpx.Response, operation: str, fallback: str
) -> None:
    if response.is_success:
        return
    raise AuthApiError(
        error_message(response) or fallback,
        operation=operation,
        status_code=response.status_code,
    )


async def login(
    client: BackendClient, credentials: LoginRequest
) -> tuple[AuthResponse, BackendSession]:
    """
    Sign in and open a backend session.

    The token is taken from the response body when the backend includes one,
    otherwise from the session cookie it sets.

    Args:
        client: Backend client.
        credentials: Email and password.

    Returns:
        The login response and the session handle for later calls.

    Raises:
        AuthApiError: If the credentials are rejected or no token came back.
    """
    response = await client.send(
        "POST", client.endpoints.auth_login, payload=credentials
    )
    _raise_for_auth_status(
        response, "login", "Login failed. Please check your credentials."
    )

    auth = AuthResponse.model_validate(response.json())
    token = auth.session_token() or response.cookies.get(
        client.settings.session_cookie
    )
    if not token:
        raise AuthApiError(
            "No session token in login response",
            operation="login",
            status_code=response.status_code,
        )

    logger.info("Signed in %s", auth.email)
    return auth, BackendSession(access_token=token, user_email=auth.email)


async def register(client: BackendClient, data: RegisterRequest) -> AuthResponse:
    """Register a new member; a confirmation code is emailed to them."""
    response = await client.send(
        "POST", client.endpoints.auth_register, payload=data
    )
    _raise_for_auth_status(
        response, "register", "Registration failed. Please try again."
    )
    return AuthResponse.model_validate(response.json())


async def confirm_email(client: BackendClient, data: ConfirmEmailRequest) -> None:
    """Confirm a member's email with the code they received."""
    response = await client.send(
        "POST", client.endpoints.auth_confirm, payload=data
    )
    _raise_for_auth_status(
        response,
        "confirm email",
        "Email confirmation failed. Please check your code.",
    )


async def resend_code(client: BackendClient, email: str) -> None:
    """Send a fresh confirmation code."""
    response = await client.send(
        "POST",
        client.endpoints.auth_resend_code,
        payload=ResendCodeRequest(email=email),
    )
    _raise_for_auth_status(
        response, "resend code", "Failed to resend code. Please try again."
    )


async def get_auth_me(client: BackendClient, session: BackendSession) -> AuthMeResponse:
    """Who the backend thinks the session belongs to, with their role."""
    response = await client.send("GET", client.endpoints.auth_me, session=session)
    _raise_for_auth_status(response, "fetch user info", "Failed to get user info.")
    return AuthMeResponse.model_validate(response.json())


async def logout(client: BackendClient, session: BackendSession) -> None:
    """End the session on the backend so it clears its cookies."""
    response = await client.send(
        "POST", client.endpoints.auth_logout, session=session
    )
    _raise_for_auth_status(response, "logout", "Logout failed.")
    logger.info("Signed out %s", session.user_email or "session")
