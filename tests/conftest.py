"""Shared test fixtures."""

import json
from typing import Any, Optional

import httpx
import pytest
import pytest_asyncio

from moov.client import Credentials, MoovClient
from moov.config import Settings

BASE_URL = "https://api.moov.test"


class FakeMoovAPI:
    """
    Stand-in for the Moov API behind an ``httpx.MockTransport``.

    Routes are keyed by (method, path). Unknown routes answer 404 with the
    API's error envelope. Every request is recorded for assertions.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.routes[(method, path)] = (status_code, json, text, headers or {})

    def fail(self, method: str, path: str, exc_type: type[httpx.TransportError]) -> None:
        self.routes[(method, path)] = exc_type

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "route not found"})
        if isinstance(route, type):
            raise route("simulated transport failure", request=request)

        status_code, body, text, headers = route
        if text is not None:
            return httpx.Response(status_code, text=text, headers=headers)
        if body is None:
            return httpx.Response(status_code, headers=headers)
        return httpx.Response(status_code, json=body, headers=headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def api() -> FakeMoovAPI:
    return FakeMoovAPI()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        base_url=BASE_URL,
        public_key="pk_test",
        secret_key="sk_test",
        http_timeout_seconds=5.0,
        _env_file=None,
    )


@pytest_asyncio.fixture
async def client(api: FakeMoovAPI, test_settings: Settings):
    """Client wired to the fake API."""
    client = MoovClient(
        credentials=Credentials(public_key="pk_test", secret_key="sk_test"),
        settings=test_settings,
        transport=httpx.MockTransport(api.handler),
    )
    yield client
    await client.aclose()
