"""Shared fixtures for adapter tests."""

import json
from unittest.mock import MagicMock

import aiohttp
import pytest


def make_session(payload=None, *, status=200, exc=None, calls=None, body=None):
    """Return a ClientSession replacement class.

    payload: object returned by resp.json().
    body: raw text returned by resp.text(); defaults to payload as JSON.
    status: HTTP status; >= 400 makes raise_for_status() raise.
    exc: exception raised when the request is issued (network error, timeout).
    calls: optional list receiving (method, url, kwargs) per request.
    """

    class FakeResponse:
        def __init__(self):
            self.status = status

        def raise_for_status(self):
            if status >= 400:
                raise aiohttp.ClientResponseError(
                    request_info=MagicMock(real_url="http://test"), history=(), status=status, message="error",
                )

        async def json(self, **kwargs):
            return payload

        async def text(self):
            if body is not None:
                return body
            return json.dumps(payload)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, **kwargs):
            self.init_kwargs = kwargs

        def _request(self, method, url, **kwargs):
            if calls is not None:
                calls.append((method, url, {**kwargs, "session": self.init_kwargs}))
            if exc is not None:
                raise exc
            return FakeResponse()

        def post(self, url, **kwargs):
            return self._request("POST", url, **kwargs)

        def get(self, url, **kwargs):
            return self._request("GET", url, **kwargs)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


@pytest.fixture
def fake_session():
    """Factory for aiohttp.ClientSession stand-ins (see make_session)."""
    return make_session

