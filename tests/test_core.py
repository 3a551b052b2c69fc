"""Basic import tests (no network)."""

import pytest

import pytinder
from pytinder import AsyncTinderClient, TinderClient, errors


def test_imports_and_exports():
    assert pytinder.__version__
    for name in pytinder.__all__:
        assert hasattr(pytinder, name), f"Missing export: {name}"
    assert pytinder.TinderError is errors.TinderError


@pytest.mark.asyncio
async def test_async_client_init():
    ac = AsyncTinderClient(timeout=5.0)
    assert ac.is_authorized is False
    assert ac.auth_token is None
    assert ac.user_id is None
    assert ac.session_defaults is None
    assert ac.activity_cursor.tzinfo is not None
    await ac.close()


def test_sync_client_init():
    c = TinderClient()
    assert c.is_authorized is False
    c.close()
