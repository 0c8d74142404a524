"""Tests for the HTTP client: auth, transport wiring and logging."""

import base64
import logging

import httpx
import pytest

from moov.client import Credentials, MoovClient
from moov.config import Settings, configure_logging
from moov.engine.call import bearer_token, endpoint, json_body
from moov.engine.errors import CredentialsNotSetError
from moov.models.enums import CallStatus


class TestCredentials:
    def test_missing_secret_key(self, test_settings):
        with pytest.raises(CredentialsNotSetError):
            MoovClient(credentials=Credentials(public_key="pk", secret_key=""), settings=test_settings)

    def test_from_settings(self, test_settings):
        credentials = Credentials.from_settings(test_settings)
        assert credentials == Credentials(public_key="pk_test", secret_key="sk_test")

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MOOV_PUBLIC_KEY", "pk_env")
        monkeypatch.setenv("MOOV_SECRET_KEY", "sk_env")
        monkeypatch.setenv("MOOV_BASE_URL", "https://sandbox.moov.test")

        settings = Settings(_env_file=None)

        assert settings.public_key == "pk_env"
        assert settings.secret_key == "sk_env"
        assert settings.base_url == "https://sandbox.moov.test"


class TestCallHttp:
    @pytest.mark.asyncio
    async def test_basic_auth_and_user_agent(self, client, api, test_settings):
        api.add("GET", "/ping", 204)

        resp = await client.call_http(endpoint("GET", "/ping"))

        assert resp.status is CallStatus.COMPLETED
        expected = base64.b64encode(b"pk_test:sk_test").decode()
        assert api.last_request.headers["Authorization"] == f"Basic {expected}"
        assert api.last_request.headers["User-Agent"] == test_settings.user_agent
        assert str(api.last_request.url) == "https://api.moov.test/ping"

    @pytest.mark.asyncio
    async def test_bearer_token_replaces_basic_auth(self, client, api):
        api.add("GET", "/ping", 200, json={})

        await client.call_http(endpoint("GET", "/ping"), bearer_token("scoped-token"))

        assert api.last_request.headers["Authorization"] == "Bearer scoped-token"

    @pytest.mark.asyncio
    async def test_build_failure_sends_nothing(self, client, api):
        with pytest.raises(TypeError):
            await client.call_http(endpoint("POST", "/transfers"), json_body({"when": object()}))

        assert api.requests == []

    @pytest.mark.asyncio
    async def test_timeout_propagates(self, client, api):
        api.fail("GET", "/slow", httpx.ReadTimeout)

        with pytest.raises(httpx.ReadTimeout):
            await client.call_http(endpoint("GET", "/slow"))

    @pytest.mark.asyncio
    async def test_logs_each_call(self, client, api, caplog):
        api.add("GET", "/ping", 200, json={})
        caplog.set_level(logging.INFO, logger="moov.client")

        await client.call_http(endpoint("GET", "/ping"))
        await client.call_http(endpoint("GET", "/missing"))

        records = [r for r in caplog.records if r.name == "moov.client"]
        messages = [r.getMessage() for r in records]
        assert messages == [
            "CALL | GET /ping -> 200 (completed)",
            "CALL | GET /missing -> 404 (not_found)",
        ]
        assert records[-1].levelno == logging.WARNING

    @pytest.mark.asyncio
    async def test_async_context_manager(self, api, test_settings):
        api.add("GET", "/ping", 200, json={})

        async with MoovClient(
            credentials=Credentials("pk", "sk"),
            settings=test_settings,
            transport=httpx.MockTransport(api.handler),
        ) as client:
            resp = await client.call_http(endpoint("GET", "/ping"))

        assert resp.status is CallStatus.COMPLETED


def test_configure_logging(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging("debug")

    assert captured["level"] == logging.DEBUG
    assert "%(name)s" in captured["format"]
