"""Shared fixtures: canned GitHub payloads and mock-transport clients."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

INSUB_PAYLOAD = {
    "login": "insub4067",
    "url": "https://api.github.com/users/insub4067",
    "name": "insub",
    "followers": 105,
    "following": 128,
    "bio": "iOS Developer",
}


@pytest.fixture
def user_payload() -> dict:
    return dict(INSUB_PAYLOAD)


@pytest.fixture
def user_bytes(user_payload) -> bytes:
    return json.dumps(user_payload).encode("utf-8")


@pytest.fixture
def seen_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_client(seen_requests) -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose transport answers with `status` and `content`.

    Every request that reaches the transport is appended to `seen_requests`.
    """

    def factory(status: int = 200, content: bytes = b"{}") -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            seen_requests.append(request)
            return httpx.Response(status, content=content)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
