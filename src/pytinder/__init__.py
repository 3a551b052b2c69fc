"""pytinder - Python client for the Tinder API."""

__version__ = "0.1.0"

from pytinder.client import AsyncTinderClient, TinderClient
from pytinder.models import RequestDescriptor
from pytinder.transport import HttpxTransport, Transport
from pytinder.errors import (
    AuthenticationError,
    BadRequestError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    TinderError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    # Client
    "AsyncTinderClient",
    "TinderClient",
    "RequestDescriptor",
    "HttpxTransport",
    "Transport",
    # Errors
    "AuthenticationError",
    "BadRequestError",
    "NetworkError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "ServerError",
    "TinderError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]
