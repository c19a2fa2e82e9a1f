"""Exception types raised by the API clients and session managers."""

from __future__ import annotations


class ClassroomTutorError(Exception):
    """Base class for all classroom tutor errors."""


class NetworkError(ClassroomTutorError):
    """Raised when a backend request fails in transport or returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ApiResponseError(NetworkError):
    """Raised when a backend response is not JSON or does not match the expected shape."""


class SessionValidationError(ClassroomTutorError):
    """Raised when a lifecycle action is requested in a state that does not allow it."""
