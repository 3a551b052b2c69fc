"""pytinder error types."""

from typing import Any, Dict, Optional


class TinderError(Exception):
    """Base exception for all pytinder errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(TinderError):
    """Invalid arguments passed to a client operation."""


class AuthenticationError(TinderError):
    """Authorizing the session failed."""

    def __init__(
        self,
        message: str,
        remote_error: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)
        self.remote_error = remote_error


class TransportError(TinderError):
    """The request/response exchange with the API did not succeed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        remote_error: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if code is None and status_code is not None:
            code = str(status_code)
        super().__init__(message, code=code, details=details)
        self.status_code = status_code
        self.remote_error = remote_error


class NetworkError(TransportError):
    """No HTTP response was received (connection failure, timeout)."""


class BadRequestError(TransportError):
    """HTTP 400."""


class UnauthorizedError(TransportError):
    """HTTP 401, usually a missing or expired auth token."""


class PermissionDeniedError(TransportError):
    """HTTP 403."""


class NotFoundError(TransportError):
    """HTTP 404."""


class RateLimitError(TransportError):
    """HTTP 429."""


class ServerError(TransportError):
    """HTTP 5xx."""
