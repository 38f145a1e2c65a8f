"""Authentication schemas - login, registration and email confirmation."""

from pydantic import Field

from aperture_schemas.base import ApiModel


class LoginRequest(ApiModel):
    """Credentials for signing in."""

    email: str
    password: str = Field(min_length=1)


class RegisterRequest(ApiModel):
    """New member registration."""

    email: str
    password: str = Field(min_length=1)
    full_name: str
    phone: str = ""
    address: str = ""


class ConfirmEmailRequest(ApiModel):
    """Email confirmation with the code sent at registration."""

    email: str
    confirmation_code: str


class ResendCodeRequest(ApiModel):
    """Request a new confirmation code."""

    email: str


class AuthResponse(ApiModel):
    """Result of a successful login or registration."""

    email: str
    full_name: str = ""
    role: str | None = None
    roles: str | None = None
    active: bool = True
    authenticated: bool | None = None

    # The backend has shipped the token under several names
    token: str | None = None
    access_token: str | None = None
    jwt: str | None = None
    secured_login_token: str | None = None

    def session_token(self) -> str | None:
        """Return the first token field the backend populated."""
        return (
            self.token
            or self.access_token
            or self.jwt
            or self.secured_login_token
            or None
        )

    @property
    def effective_role(self) -> str | None:
        """Role name, whichever of ``role`` / ``roles`` the backend sent."""
        return self.role or self.roles


class AuthMeResponse(ApiModel):
    """The signed-in user as reported by ``/api/auth/me``."""

    roles: str | None = None
    email: str
    authenticated: bool
