"""Authorization and activity cursor state for a single client."""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_cursor(moment: datetime) -> str:
    """Serialize a cursor as ISO-8601 UTC with millisecond precision."""
    text = _as_utc(moment).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


class Session:
    """
    Mutable session state owned by one client.

    Token, user id and defaults are written together by ``authorize`` and
    never cleared. The activity cursor only moves forward through
    ``advance_cursor``.
    """

    def __init__(self, created_at: Optional[datetime] = None):
        self._auth_token: Optional[str] = None
        self._user_id: Optional[str] = None
        self._defaults: Optional[Mapping[str, Any]] = None
        self._activity_cursor = _as_utc(created_at or datetime.now(timezone.utc))

    @property
    def is_authorized(self) -> bool:
        return self._auth_token is not None

    @property
    def auth_token(self) -> Optional[str]:
        return self._auth_token

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def defaults(self) -> Optional[Mapping[str, Any]]:
        if self._defaults is None:
            return None
        # Deep copy so nested objects cannot be edited through the view
        return MappingProxyType(copy.deepcopy(self._defaults))

    @property
    def activity_cursor(self) -> datetime:
        return self._activity_cursor

    def authorize(self, response: Mapping[str, Any]) -> None:
        """
        Apply a successful auth response.

        Raises:
            ValueError: the response lacks ``token`` or ``user._id``; the
                session is left unchanged.
        """
        if not isinstance(response, Mapping):
            raise ValueError("auth response is not a JSON object")
        token = response.get("token")
        user = response.get("user")
        user_id = user.get("_id") if isinstance(user, Mapping) else None
        if not token:
            raise ValueError("auth response has no token")
        if not user_id:
            raise ValueError("auth response has no user._id")

        self._auth_token = token
        self._user_id = user_id
        self._defaults = copy.deepcopy(dict(response))
        logger.info("Session authorized for user %s", user_id)

    def advance_cursor(self, moment: datetime) -> None:
        """Move the activity cursor forward to ``moment``."""
        moment = _as_utc(moment)
        if moment < self._activity_cursor:
            logger.debug(
                "Ignoring cursor %s older than current %s",
                format_cursor(moment),
                format_cursor(self._activity_cursor),
            )
            return
        self._activity_cursor = moment
