"""Backend API exceptions."""


class BackendError(Exception):
    """Base exception for restaurant backend API errors."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.status_code = status_code
        super().__init__(message)


class SessionExpiredError(BackendError):
    """
    The authenticated session is no longer valid (HTTP 401).

    Always raised after the session expiry signal has fired. ``surface`` tells
    UI error handling whether to show this error in addition to the forced
    logout the signal triggers.
    """

    def __init__(
        self,
        message: str = "Session expired",
        operation: str | None = None,
        surface: bool = True,
    ) -> None:
        super().__init__(message, operation, status_code=401)
        self.surface = surface


class RequestFailedError(BackendError):
    """Any other non-success response from the backend."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message, operation, status_code)
        self.response_body = response_body


class AuthApiError(BackendError):
    """Login, registration or confirmation was rejected."""


def user_message(error: BackendError) -> str | None:
    """
    Message to show the user for a failed call.

    Returns None for a session expiry the application has chosen not to
    surface; the forced logout is the only notification in that case.
    """
    if isinstance(error, SessionExpiredError) and not error.surface:
        return None
    return error.message
