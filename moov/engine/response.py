"""
Response classification and decoding.

Every HTTP response is reduced to one ``CallStatus`` before endpoint code
looks at it. Endpoints then either hand the response to one of the
``completed_*`` helpers or switch on ``resp.status`` themselves when a
status has an endpoint-specific meaning.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from moov.engine.errors import ERRORS_BY_STATUS, CallError, DecodeError, RateLimitError
from moov.models.enums import CallStatus

T = TypeVar("T")

_STATUS_BY_CODE: dict[int, CallStatus] = {
    200: CallStatus.COMPLETED,
    201: CallStatus.COMPLETED,
    204: CallStatus.COMPLETED,
    202: CallStatus.STARTED,
    400: CallStatus.BAD_REQUEST,
    413: CallStatus.BAD_REQUEST,
    415: CallStatus.BAD_REQUEST,
    409: CallStatus.STATE_CONFLICT,
    422: CallStatus.FAILED_VALIDATION,
    404: CallStatus.NOT_FOUND,
    410: CallStatus.NOT_FOUND,
    401: CallStatus.UNAUTHENTICATED,
    403: CallStatus.UNAUTHORIZED,
    405: CallStatus.UNAUTHORIZED,
    429: CallStatus.RATE_LIMITED,
}


def classify_status(status_code: int) -> CallStatus:
    """Map an HTTP status code to its semantic status. Unknown codes are server errors."""
    return _STATUS_BY_CODE.get(status_code, CallStatus.SERVER_ERROR)


class CallResponse(ABC):
    """A classified API response."""

    @property
    @abstractmethod
    def status(self) -> CallStatus:
        ...

    @property
    @abstractmethod
    def status_code(self) -> int:
        ...

    @abstractmethod
    def unmarshal(self, shape: Any) -> Any:
        """
        Decode the body into ``shape`` (a model class or a typing form such
        as ``list[Model]``).

        Raises:
            DecodeError: The body does not match ``shape``.
        """
        ...

    @abstractmethod
    def error(self) -> CallError:
        """Build the exception describing this response."""
        ...


class HttpCallResponse(CallResponse):
    """``CallResponse`` backed by an ``httpx.Response``."""

    def __init__(self, response: httpx.Response):
        self._response = response
        self._status = classify_status(response.status_code)

    @property
    def status(self) -> CallStatus:
        return self._status

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def http_response(self) -> httpx.Response:
        return self._response

    def unmarshal(self, shape: Any) -> Any:
        try:
            return TypeAdapter(shape).validate_json(self._response.content)
        except ValidationError as e:
            raise DecodeError(f"response body does not match {shape!r}: {e}") from e

    def error(self) -> CallError:
        error_cls = ERRORS_BY_STATUS.get(self._status, CallError)
        message = self._error_message()
        if error_cls is RateLimitError:
            return RateLimitError(
                message,
                status_code=self.status_code,
                retry_after=_parse_retry_after(self._response.headers.get("Retry-After")),
            )
        return error_cls(message, status=self._status, status_code=self.status_code)

    def _error_message(self) -> str:
        """Message from the API's ``{"error": "..."}`` envelope, falling back to the raw body."""
        text = self._response.text.strip()
        if text:
            try:
                data = json.loads(text)
            except ValueError:
                return text
            if isinstance(data, dict) and isinstance(data.get("error"), str):
                return data["error"]
            return text
        return self._response.reason_phrase or self._status.label


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        return None


def unmarshal_object_response(resp: CallResponse, model: type[T]) -> T:
    return resp.unmarshal(model)


def unmarshal_list_response(resp: CallResponse, model: type[T]) -> list[T]:
    return resp.unmarshal(list[model])


# Three shapes cover most endpoints: no body, one object, or a list.


def completed_none_or_error(resp: CallResponse) -> None:
    if resp.status is not CallStatus.COMPLETED:
        raise resp.error()


def completed_object_or_error(resp: CallResponse, model: type[T]) -> T:
    if resp.status is not CallStatus.COMPLETED:
        raise resp.error()
    return unmarshal_object_response(resp, model)


def completed_list_or_error(resp: CallResponse, model: type[T]) -> list[T]:
    if resp.status is not CallStatus.COMPLETED:
        raise resp.error()
    return unmarshal_list_response(resp, model)
