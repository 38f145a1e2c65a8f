"""
Session expiry signal - tells the application its session is gone.

Owned by the application's composition root and handed to BackendClient.
API calls fire it on every 401; the authentication layer listens and forces
a logout. Listener lifecycle belongs to whoever connects.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class SessionExpiredEvent(BaseModel):
    """Details of the call that observed the expired session."""

    operation: str
    url: str = ""
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


SessionExpiredListener = Callable[[SessionExpiredEvent], None]


class SessionExpirySignal:
    """Fan-out of session expiry notifications to zero or more listeners."""

    def __init__(self) -> None:
        self._listeners: list[SessionExpiredListener] = []

    @property
    def receivers(self) -> int:
        """Number of connected listeners."""
        return len(self._listeners)

    def connect(self, listener: SessionExpiredListener) -> Callable[[], None]:
        """
        Register a listener.

        Args:
            listener: Called with a SessionExpiredEvent on every trigger.

        Returns:
            A callable that disconnects the listener again.
        """
        self._listeners.append(listener)
        return lambda: self.disconnect(listener)

    def disconnect(self, listener: SessionExpiredListener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def trigger(self, event: SessionExpiredEvent) -> None:
        """
        Notify every listener synchronously.

        There is no "already fired" state: each call notifies again. A failing
        listener is logged and does not stop the others.
        """
        logger.info(
            "Session expired during %s, notifying %d listener(s)",
            event.operation,
            len(self._listeners),
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Session expiry listener %r failed for %s",
                    listener,
                    event.operation,
                )
