"""HTTP transport for request descriptors."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx

from pytinder import errors
from pytinder.models import RequestDescriptor

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """
    Anything that can perform the exchange described by a RequestDescriptor.

    ``send`` returns the parsed JSON response. Failures should be raised as
    ``errors.TransportError`` (or a subclass) carrying the remote ``error``
    text in ``remote_error`` so callers can tell them apart from other errors.
    """

    async def send(self, request: RequestDescriptor) -> Any:
        ...


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            client: Pre-configured httpx client (not closed by ``close()``)
        """
        self.timeout = timeout
        self._http_client = client
        self._owns_client = client is None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    def _handle_http_error(self, response: httpx.Response) -> None:
        """Handle HTTP error responses."""
        remote_error: Optional[str] = None
        try:
            error_data = response.json()
            if isinstance(error_data, dict) and error_data.get("error") is not None:
                remote_error = str(error_data["error"])
        except ValueError:
            pass
        error_msg = remote_error or response.text or f"HTTP {response.status_code}"

        status = response.status_code
        if status == 400:
            exc_type = errors.BadRequestError
        elif status == 401:
            exc_type = errors.UnauthorizedError
        elif status == 403:
            exc_type = errors.PermissionDeniedError
        elif status == 404:
            exc_type = errors.NotFoundError
        elif status == 429:
            exc_type = errors.RateLimitError
        elif 500 <= status <= 599:
            exc_type = errors.ServerError
        else:
            exc_type = errors.TransportError

        raise exc_type(
            f"HTTP {status}: {error_msg}",
            status_code=status,
            remote_error=remote_error or error_msg,
            details={"url": str(response.request.url)},
        )

    async def send(self, request: RequestDescriptor) -> Any:
        """
        Perform the exchange and return the parsed JSON response.

        Raises:
            NetworkError: No response was received
            TransportError: Non-2xx response (status specific subclass)
        """
        client = await self._ensure_client()

        kwargs = {"headers": request.headers}
        if request.json_body is not None:
            kwargs["json"] = request.json_body

        logger.debug("%s %s", request.method, request.url)
        try:
            response = await client.request(request.method, request.url, **kwargs)
        except httpx.HTTPError as e:
            raise errors.NetworkError(
                f"Request to {request.url} failed: {str(e)}",
                remote_error=str(e),
                details={"http_error": str(e)},
            ) from e

        if not response.is_success:
            self._handle_http_error(response)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise errors.TransportError(
                f"Invalid JSON in response from {request.url}",
                status_code=response.status_code,
                details={"body": response.text[:200]},
            ) from e

    async def close(self):
        """Close the HTTP client if this transport created it."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
