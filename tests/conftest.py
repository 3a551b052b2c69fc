"""Shared fixtures (no network)."""

from datetime import datetime, timedelta, timezone

import pytest

from pytinder.models import RequestDescriptor


class StubTransport:
    """Records requests and replays queued results or exceptions."""

    def __init__(self, *results):
        self.requests = []
        self._results = list(results)
        self.closed = False

    def queue(self, result):
        self._results.append(result)

    async def send(self, request: RequestDescriptor):
        self.requests.append(request)
        result = self._results.pop(0) if self._results else {}
        if isinstance(result, Exception):
            raise result
        return result

    async def close(self):
        self.closed = True

    @property
    def last(self) -> RequestDescriptor:
        return self.requests[-1]


class FakeClock:
    """Deterministic clock that moves forward one second per call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


AUTH_RESPONSE = {
    "token": "tok-abc",
    "user": {"_id": "u1", "name": "Alex"},
    "globals": {"friends": True},
}


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def clock():
    return FakeClock()
