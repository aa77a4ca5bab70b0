"""Shared fixtures."""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass
class RecordedCall:
    verb: str
    url: str
    query: dict[str, Any]
    data: dict[str, Any] | None


class RecordingTransport:
    """Transport double that records calls and returns a canned outcome."""

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self.response: Any = None
        self.error: BaseException | None = None

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]

    async def get(self, url, *, query, data=None):
        return self._record("GET", url, query, data)

    async def post(self, url, *, query, data=None):
        return self._record("POST", url, query, data)

    async def put(self, url, *, query, data=None):
        return self._record("PUT", url, query, data)

    async def delete(self, url, *, query, data=None):
        return self._record("DELETE", url, query, data)

    def _record(self, verb, url, query, data):
        self.calls.append(RecordedCall(verb=verb, url=url, query=query, data=data))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
