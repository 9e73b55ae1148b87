"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest
import pytest_asyncio

from swapsdk import SwapSDK

TEST_BASE_URL = "https://api.test.com"


class FakeBackend:
    """Stands in for the swap API behind an httpx.MockTransport.

    Records every request it receives and answers with whatever
    `respond_with` / `fail_with` configured last.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responder: Callable[[httpx.Request], Any] = lambda request: httpx.Response(200, json={})

    def respond_with(self, status_code: int = 200, json: Any = None, content: Optional[bytes] = None) -> None:
        if content is not None:
            self._responder = lambda request: httpx.Response(status_code, content=content)
        else:
            self._responder = lambda request: httpx.Response(status_code, json=json)

    def fail_with(self, exc_type: type[httpx.TransportError], message: str = "boom") -> None:
        def raise_error(request: httpx.Request):
            raise exc_type(message, request=request)

        self._responder = raise_error

    def handle_with(self, responder: Callable[[httpx.Request], Any]) -> None:
        self._responder = responder

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responder(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def sdk(backend: FakeBackend):
    """Client pointed at the fake backend, with no token set."""
    client = SwapSDK(base_url=TEST_BASE_URL, transport=backend.transport())
    yield client
    await client.aclose()


@pytest.fixture
def mock_currency() -> dict:
    return {
        "symbol": "zec",
        "name": "Zcash",
        "image": "https://example.com/zec.png",
        "network": "zec",
        "hasExternalId": False,
        "decimals": 8,
        "isFiat": False,
        "isActive": True,
    }


@pytest.fixture
def mock_swap() -> dict:
    return {
        "id": "swap-123",
        "userId": "user-123",
        "fromCurrency": "zec",
        "toCurrency": "sol",
        "fromAmount": 1,
        "toAmount": 10,
        "recipientAddress": "0x1234567890abcdef",
        "depositAddress": "0xabcdef1234567890",
        "status": "waiting",
        "createdAt": "2025-01-01T00:00:00.000Z",
        "updatedAt": "2025-01-01T00:00:00.000Z",
    }
