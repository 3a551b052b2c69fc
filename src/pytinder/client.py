"""pytinder session client implementation."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from pytinder import errors
from pytinder.constants import API_HOST, AUTH_HEADER, FULL_HISTORY, OS_VERSION, USER_AGENT
from pytinder.models import RequestDescriptor
from pytinder.session import Session, format_cursor
from pytinder.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_user_id(user_id: str) -> str:
    if not isinstance(user_id, str) or not user_id:
        raise errors.ValidationError("user_id must be a non-empty string")
    return user_id


class AsyncTinderClient:
    """
    Async Tinder API client holding a single session.

    Every operation except ``authorize`` expects the session to be authorized.
    This is not checked locally: an unauthorized call is sent without the
    auth header and the API rejects it (usually ``UnauthorizedError``).
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        timeout: float = 30.0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize Tinder async client.

        Args:
            transport: Transport performing the exchange (default: HttpxTransport)
            timeout: Timeout in seconds for the default transport
            clock: Returns the current time; used for the activity cursor
        """
        self._clock = clock or _utcnow
        self._session = Session(created_at=self._clock())
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(timeout=timeout)

    # ===== Session state =====

    @property
    def is_authorized(self) -> bool:
        return self._session.is_authorized

    @property
    def auth_token(self) -> Optional[str]:
        return self._session.auth_token

    @property
    def user_id(self) -> Optional[str]:
        return self._session.user_id

    @property
    def session_defaults(self) -> Optional[Mapping[str, Any]]:
        """Account and client globals returned by the last authorize call."""
        return self._session.defaults

    @property
    def activity_cursor(self) -> datetime:
        return self._session.activity_cursor

    # ===== Request construction =====

    def build_request(
        self,
        path: str,
        payload: Any = None,
        method: str = "GET",
    ) -> RequestDescriptor:
        """
        Describe a request to the API without sending it.

        Args:
            path: Path relative to the API host, without leading slash
            payload: JSON body, or None
            method: HTTP method

        Returns:
            RequestDescriptor carrying the client headers and, when
            authorized, the auth token header
        """
        headers: Dict[str, str] = {
            "User-Agent": USER_AGENT,
            "os_version": OS_VERSION,
        }
        token = self._session.auth_token
        if token:
            headers[AUTH_HEADER] = token

        return RequestDescriptor(
            url=f"{API_HOST}/{path}",
            method=method.upper(),
            headers=headers,
            json_body=payload,
        )

    async def _request(self, path: str, payload: Any = None, method: str = "GET") -> Any:
        request = self.build_request(path, payload, method)
        logger.debug("Dispatching %s %s", request.method, path)
        return await self._transport.send(request)

    # ===== Operations =====

    async def authorize(self, facebook_token: str, facebook_id: str) -> Dict[str, Any]:
        """
        Authorize this client with Facebook credentials.

        Args:
            facebook_token: Facebook OAuth token of the user
            facebook_id: Facebook user id

        Returns:
            Raw auth response (also kept as ``session_defaults``)

        Raises:
            AuthenticationError: The API rejected the credentials, the
                exchange failed, or the response carried no token
        """
        params = {
            "facebook_token": facebook_token,
            "facebook_id": facebook_id,
        }
        try:
            result = await self._request("auth", params, "POST")
        except errors.TransportError as e:
            remote = e.remote_error or e.message
            raise errors.AuthenticationError(
                f"Failed to authenticate: {remote}",
                remote_error=remote,
                details={"status_code": e.status_code},
            ) from e
        except Exception as e:
            # Injected transports may raise their own structured errors
            remote = getattr(e, "error", None) or str(e)
            raise errors.AuthenticationError(
                f"Failed to authenticate: {remote}",
                remote_error=str(remote),
            ) from e

        try:
            self._session.authorize(result)
        except ValueError as e:
            raise errors.AuthenticationError(
                f"Failed to authenticate: {e}",
                remote_error=str(e),
            ) from e
        return result

    async def get_recommendations(self, limit: int) -> Any:
        """
        Get a list of nearby profiles.

        Args:
            limit: Maximum number of profiles to fetch (positive)
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise errors.ValidationError(f"limit must be a positive integer, got {limit!r}")
        return await self._request("user/recs", {"limit": limit}, "GET")

    async def update_position(self, lon: float, lat: float) -> Any:
        """Update the geolocation of the authorized user."""
        return await self._request("user/ping", {"lon": lon, "lat": lat}, "POST")

    async def send_message(self, user_id: str, message: str) -> Any:
        """
        Send a message to a match.

        Args:
            user_id: Id of the matched user
            message: Message text (non-empty)
        """
        _require_user_id(user_id)
        if not isinstance(message, str) or not message:
            raise errors.ValidationError("message must be a non-empty string")
        return await self._request(f"user/matches/{user_id}", {"message": message}, "POST")

    async def pass_user(self, user_id: str) -> Any:
        """Swipe left on a user."""
        _require_user_id(user_id)
        return await self._request(f"pass/{user_id}", None, "GET")

    async def like_user(self, user_id: str) -> Any:
        """Swipe right on a user."""
        _require_user_id(user_id)
        return await self._request(f"like/{user_id}", None, "GET")

    async def get_updates(self) -> Any:
        """
        Get what happened since the last successful call (new matches,
        messages, blocks, ...).

        The activity cursor is advanced only when the request succeeds.
        """
        since = format_cursor(self._session.activity_cursor)
        result = await self._request("updates", {"last_activity_date": since}, "POST")
        self._session.advance_cursor(self._clock())
        return result

    async def get_history(self) -> Any:
        """
        Get the entire history of the user (all matches, messages, blocks).

        The API drops old messages after some threshold. The cursor is
        neither read nor advanced.
        """
        return await self._request("updates", {"last_activity_date": FULL_HISTORY}, "POST")

    async def get_user(self, user_id: str) -> Any:
        """Get a user profile by id."""
        _require_user_id(user_id)
        return await self._request(f"user/{user_id}", None, "GET")

    async def close(self):
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


class TinderClient:
    """Synchronous wrapper around AsyncTinderClient."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        timeout: float = 30.0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize synchronous Tinder client."""
        self._async_client = AsyncTinderClient(transport, timeout=timeout, clock=clock)
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        """Get or create the private event loop."""
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop

    def _run(self, coro):
        """Run async coroutine synchronously."""
        loop = self._get_loop()
        return loop.run_until_complete(coro)

    # Session state
    @property
    def is_authorized(self) -> bool:
        return self._async_client.is_authorized

    @property
    def auth_token(self) -> Optional[str]:
        return self._async_client.auth_token

    @property
    def user_id(self) -> Optional[str]:
        return self._async_client.user_id

    @property
    def session_defaults(self) -> Optional[Mapping[str, Any]]:
        return self._async_client.session_defaults

    @property
    def activity_cursor(self) -> datetime:
        return self._async_client.activity_cursor

    def build_request(self, path: str, payload: Any = None, method: str = "GET") -> RequestDescriptor:
        return self._async_client.build_request(path, payload, method)

    # Operations
    def authorize(self, facebook_token: str, facebook_id: str) -> Dict[str, Any]:
        """Authorize (blocking)."""
        return self._run(self._async_client.authorize(facebook_token, facebook_id))

    def get_recommendations(self, limit: int) -> Any:
        """Get recommendations (blocking)."""
        return self._run(self._async_client.get_recommendations(limit))

    def update_position(self, lon: float, lat: float) -> Any:
        """Update position (blocking)."""
        return self._run(self._async_client.update_position(lon, lat))

    def send_message(self, user_id: str, message: str) -> Any:
        """Send message (blocking)."""
        return self._run(self._async_client.send_message(user_id, message))

    def pass_user(self, user_id: str) -> Any:
        """Pass on a user (blocking)."""
        return self._run(self._async_client.pass_user(user_id))

    def like_user(self, user_id: str) -> Any:
        """Like a user (blocking)."""
        return self._run(self._async_client.like_user(user_id))

    def get_updates(self) -> Any:
        """Get incremental updates (blocking)."""
        return self._run(self._async_client.get_updates())

    def get_history(self) -> Any:
        """Get full history (blocking)."""
        return self._run(self._async_client.get_history())

    def get_user(self, user_id: str) -> Any:
        """Get user profile (blocking)."""
        return self._run(self._async_client.get_user(user_id))

    def close(self):
        """Close the client and its event loop."""
        self._run(self._async_client.close())
        self._loop.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
