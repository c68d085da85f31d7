# tests/conftest.py
"""
Pytest configuration and shared fixtures.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeResponse:
    """Stands in for aiohttp.ClientResponse: a status and a readable body."""

    def __init__(self, status: int = 200, body: bytes = b"", hang: bool = False):
        self.status = status
        self._body = body
        self._hang = hang

    async def read(self) -> bytes:
        if self._hang:
            # Never resolves; only caller cancellation gets us out.
            await asyncio.Event().wait()
        return self._body


class FakeRequestContext:
    """The async context manager returned by ClientSession.get()."""

    def __init__(self, response: FakeResponse | None = None, error: BaseException | None = None):
        self._response = response
        self._error = error

    async def __aenter__(self) -> FakeResponse:
        if self._error is not None:
            raise self._error
        return self._response

    async def __aexit__(self, exc_type, exc, tb):
        return False


@pytest.fixture
def make_session():
    """
    Builds a mocked aiohttp.ClientSession whose get() yields a canned response.
    The mock records every call so tests can inspect the URL and headers.
    """

    def _make(status: int = 200, body: bytes = b"", error: BaseException | None = None, hang: bool = False):
        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        session.get = MagicMock(
            return_value=FakeRequestContext(FakeResponse(status, body, hang=hang), error)
        )
        return session

    return _make
