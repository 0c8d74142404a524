"""
HTTP client for the Moov API.

``MoovClient`` holds the only configuration shared between calls: the
base URL, the credentials and an ``httpx.AsyncClient`` with its
connection pool. Each ``call_http`` is one request and one classified
response; nothing is retried or cached here.

    async with MoovClient() as client:
        transfer = await get_transfer(client, transfer_id)
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from moov.config import Settings, settings as default_settings
from moov.engine.call import CallArg, new_call
from moov.engine.errors import CredentialsNotSetError
from moov.engine.response import CallResponse, HttpCallResponse
from moov.models.enums import CallStatus

logger = logging.getLogger("moov.client")


@dataclass(frozen=True)
class Credentials:
    """API key pair, sent as HTTP basic auth."""

    public_key: str
    secret_key: str

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Credentials":
        settings = settings or default_settings
        return cls(public_key=settings.public_key, secret_key=settings.secret_key)

    def validate(self) -> None:
        if not self.public_key or not self.secret_key:
            raise CredentialsNotSetError()


class MoovClient:
    """
    Async client for the Moov REST API.

    Args:
        credentials: API keys. Defaults to ``MOOV_PUBLIC_KEY`` and
            ``MOOV_SECRET_KEY`` from the environment.
        settings: Base URL, timeout and user agent. Defaults to the
            module-level settings.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``
            in tests.

    Raises:
        CredentialsNotSetError: Either key is empty.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or default_settings
        self._credentials = credentials or Credentials.from_settings(self._settings)
        self._credentials.validate()

        self._http = httpx.AsyncClient(
            base_url=self._settings.base_url.rstrip("/"),
            timeout=httpx.Timeout(self._settings.http_timeout_seconds),
            headers={"User-Agent": self._settings.user_agent},
            auth=httpx.BasicAuth(self._credentials.public_key, self._credentials.secret_key),
            transport=transport,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    async def __aenter__(self) -> "MoovClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def call_http(self, endpoint_arg: CallArg, *args: CallArg) -> CallResponse:
        """
        Build a request from call options, send it and classify the response.

        Errors raised while building the request (e.g. an unserializable
        body) and transport errors from ``httpx`` propagate unchanged.
        """
        call = new_call(endpoint_arg, *args)

        request = self._http.build_request(
            call.method,
            call.path,
            params=call.params or None,
            headers=call.headers,
            content=call.body,
        )
        auth = httpx.USE_CLIENT_DEFAULT
        if call.token:
            request.headers["Authorization"] = f"Bearer {call.token}"
            auth = None

        response = await self._http.send(request, auth=auth)
        result = HttpCallResponse(response)

        log = logger.info if result.status in (CallStatus.COMPLETED, CallStatus.STARTED) else logger.warning
        log(
            "CALL | %s %s -> %d (%s)",
            call.method,
            call.path,
            response.status_code,
            result.status.label,
        )
        return result
