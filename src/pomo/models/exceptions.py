"""Custom exceptions for pomo."""


class PomoError(Exception):
    """Base exception for all pomo errors."""


class InvalidConfigError(PomoError):
    """Raised when a session is configured with non-positive blocks or durations."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class NotificationError(PomoError):
    """Raised when the desktop notification could not be delivered."""
