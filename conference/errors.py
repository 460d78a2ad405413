"""Domain-specific exceptions for the conference sessions API."""

from __future__ import annotations


class SessionValidationError(ValueError):
    """Raised when a create payload is missing fields or carries bad values."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConferenceAPIError(RuntimeError):
    """Raised by the client when the server answers with an unexpected status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


__all__ = [
    "SessionValidationError",
    "ConferenceAPIError",
]
