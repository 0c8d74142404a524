"""
Request construction.

A request is assembled from an ordered list of call options. Each option
is a plain callable that mutates a ``CallBuilder``; options are applied
strictly in the order given so later ones override earlier ones (a caller
can replace a default header, for example). If an option raises, the
remaining options are not applied and the exception propagates, so a
half-built request is never sent.

    call = new_call(
        endpoint("POST", "/transfers/%s/refunds", transfer_id),
        accept_json(),
        idempotency_key(),
        json_body(RefundPayload(amount=500)),
    )
"""

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote

from pydantic import BaseModel

IDEMPOTENCY_KEY_HEADER = "X-Idempotency-Key"
WAIT_FOR_HEADER = "X-Wait-For"


@dataclass
class CallBuilder:
    """A request in progress."""

    method: str = "GET"
    path: str = "/"
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    token: Optional[str] = None
    body: Optional[bytes] = None


CallArg = Callable[[CallBuilder], None]


def new_call(endpoint_arg: CallArg, *args: CallArg) -> CallBuilder:
    """Apply the endpoint option, then every other option in order."""
    call = CallBuilder()
    for arg in (endpoint_arg, *args):
        arg(call)
    return call


def endpoint(method: str, path_fmt: str, *path_args: Any) -> CallArg:
    """Set the HTTP method and path. Path arguments are URL-quoted."""
    quoted = tuple(quote(str(a), safe="") for a in path_args)

    def apply(call: CallBuilder) -> None:
        call.method = method.upper()
        call.path = path_fmt % quoted if quoted else path_fmt

    return apply


def json_body(body: Any) -> CallArg:
    """
    Serialize ``body`` as the JSON request body.

    pydantic models are written with their API key names and without unset
    fields. Anything else must be JSON-serializable; if it is not, the
    ``TypeError`` aborts the call.
    """

    def apply(call: CallBuilder) -> None:
        if isinstance(body, BaseModel):
            payload = body.model_dump_json(by_alias=True, exclude_none=True)
        else:
            payload = json.dumps(body)
        call.headers["Content-Type"] = "application/json"
        call.body = payload.encode("utf-8")

    return apply


def accept_json() -> CallArg:
    def apply(call: CallBuilder) -> None:
        call.headers["Accept"] = "application/json"

    return apply


def wait_for(state: str) -> CallArg:
    """Ask the API to hold the response until ``state`` is reached."""

    def apply(call: CallBuilder) -> None:
        call.headers[WAIT_FOR_HEADER] = state

    return apply


def idempotency_key(key: Optional[str] = None) -> CallArg:
    """Attach an idempotency key, generating a fresh uuid4 when none is given."""
    value = key or str(uuid.uuid4())

    def apply(call: CallBuilder) -> None:
        call.headers[IDEMPOTENCY_KEY_HEADER] = value

    return apply


def header(name: str, value: str) -> CallArg:
    def apply(call: CallBuilder) -> None:
        call.headers[name] = value

    return apply


def bearer_token(token: str) -> CallArg:
    """Authenticate this call with an access token instead of the API keys."""

    def apply(call: CallBuilder) -> None:
        call.token = token

    return apply


def query_params(values: Mapping[str, Any]) -> CallArg:
    """Add query parameters, skipping every zero value (see ``encode_query_value``)."""

    def apply(call: CallBuilder) -> None:
        for name, value in values.items():
            encoded = encode_query_value(value)
            if encoded is not None:
                call.params[name] = encoded

    return apply


def encode_query_value(value: Any) -> Optional[str]:
    """
    Render one query value, or return None when it should be omitted.

    None, "", 0, False and empty lists are omitted. Lists are joined with
    commas, datetimes are written as RFC3339 and True as "true".
    """
    if isinstance(value, Enum):
        value = value.value
    if value is None or value is False:
        return None
    if value is True:
        return "true"
    if isinstance(value, datetime):
        return format_rfc3339(value)
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value) or None
    if value == 0 or value == "":
        return None
    return str(value)


def format_rfc3339(value: datetime) -> str:
    """Seconds-precision RFC3339; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
