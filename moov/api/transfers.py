"""
Transfer endpoints: create, list, get, update metadata, transfer options,
refunds and reversals.

POST  /transfers                              create_transfer
GET   /transfers                              list_transfers
GET   /transfers/{transferID}                 get_transfer
PATCH /transfers/{transferID}                 update_transfer_metadata
POST  /transfer-options                       transfer_options
POST  /transfers/{transferID}/refunds         refund_transfer
GET   /transfers/{transferID}/refunds         list_refunds
GET   /transfers/{transferID}/refunds/{id}    get_refund
POST  /transfers/{transferID}/reversals       reverse_transfer

Mutating calls that move money send a fresh ``X-Idempotency-Key``. A 409
on those calls means the key was reused with a different request and is
raised as ``IdempotencyKeyError``.
"""

from typing import Optional

from moov.client import MoovClient
from moov.engine.call import accept_json, endpoint, idempotency_key, json_body, query_params, wait_for
from moov.engine.errors import IdempotencyKeyError, RequestBodyError
from moov.engine.response import (
    CallResponse,
    completed_list_or_error,
    completed_object_or_error,
    unmarshal_object_response,
)
from moov.models.enums import WAIT_FOR_RAIL_RESPONSE, CallStatus
from moov.models.transfer import (
    AsynchronousTransfer,
    CanceledTransfer,
    CreatedTransferOptions,
    CreateTransfer,
    MetadataPayload,
    Refund,
    RefundPayload,
    SearchQueryPayload,
    SynchronousTransfer,
    TransferOptionsPayload,
)

PATH_TRANSFERS = "/transfers"
PATH_TRANSFER = "/transfers/%s"
PATH_TRANSFER_OPTIONS = "/transfer-options"
PATH_REFUNDS = "/transfers/%s/refunds"
PATH_REFUND = "/transfers/%s/refunds/%s"
PATH_REVERSALS = "/transfers/%s/reversals"


async def create_transfer(
    client: MoovClient,
    transfer: CreateTransfer,
    is_sync: bool = False,
) -> tuple[Optional[SynchronousTransfer], Optional[AsynchronousTransfer]]:
    """
    Create a transfer.

    With ``is_sync`` the API is asked to wait for the rail before answering.
    Exactly one element of the returned pair is set: the full transfer when
    the call completed, or the async handle (``transfer_id`` and
    ``created_on`` only) when the transfer was accepted but not resolved,
    which also happens on a sync request whose rail timed out.

    Raises:
        IdempotencyKeyError: The idempotency key was already used.
        CallError: Any other failure status.
    """
    args = [accept_json(), idempotency_key(), json_body(transfer)]
    if is_sync:
        args.append(wait_for(WAIT_FOR_RAIL_RESPONSE))

    resp = await client.call_http(endpoint("POST", PATH_TRANSFERS), *args)

    if resp.status is CallStatus.COMPLETED:
        return unmarshal_object_response(resp, SynchronousTransfer), None
    if resp.status is CallStatus.STARTED:
        return None, unmarshal_object_response(resp, AsynchronousTransfer)
    if resp.status is CallStatus.STATE_CONFLICT:
        raise _idempotency_error(resp)
    raise resp.error()


async def list_transfers(
    client: MoovClient,
    search: Optional[SearchQueryPayload] = None,
) -> list[SynchronousTransfer]:
    """List transfers matching ``search``. Unset filters are not sent."""
    search = search or SearchQueryPayload()
    resp = await client.call_http(
        endpoint("GET", PATH_TRANSFERS),
        accept_json(),
        query_params(search.model_dump(by_alias=True)),
    )
    return completed_list_or_error(resp, SynchronousTransfer)


async def get_transfer(client: MoovClient, transfer_id: str, account_id: str = "") -> SynchronousTransfer:
    resp = await client.call_http(
        endpoint("GET", PATH_TRANSFER, transfer_id),
        accept_json(),
        query_params({"accountID": account_id}),
    )
    return completed_object_or_error(resp, SynchronousTransfer)


async def update_transfer_metadata(
    client: MoovClient,
    transfer_id: str,
    metadata: dict[str, str],
    account_id: str = "",
) -> SynchronousTransfer:
    """Replace the metadata on a transfer and return the updated transfer."""
    resp = await client.call_http(
        endpoint("PATCH", PATH_TRANSFER, transfer_id),
        accept_json(),
        query_params({"accountID": account_id}),
        json_body(MetadataPayload(metadata=metadata)),
    )
    return completed_object_or_error(resp, SynchronousTransfer)


async def transfer_options(client: MoovClient, payload: TransferOptionsPayload) -> CreatedTransferOptions:
    """Payment methods available to move ``payload.amount`` between two accounts."""
    resp = await client.call_http(
        endpoint("POST", PATH_TRANSFER_OPTIONS),
        accept_json(),
        json_body(payload),
    )
    return completed_object_or_error(resp, CreatedTransferOptions)


async def refund_transfer(
    client: MoovClient,
    transfer_id: str,
    amount: Optional[int] = None,
    is_sync: bool = False,
) -> Refund:
    """
    Refund all or part of a card transfer.

    Args:
        amount: Cents to refund; None refunds the full amount.
        is_sync: Wait for the card network before answering.

    Raises:
        IdempotencyKeyError: The idempotency key was already used.
        RequestBodyError: The API rejected the refund amount.
        CallError: Any other failure status.
    """
    args = [accept_json(), idempotency_key(), json_body(RefundPayload(amount=amount))]
    if is_sync:
        args.append(wait_for(WAIT_FOR_RAIL_RESPONSE))

    resp = await client.call_http(endpoint("POST", PATH_REFUNDS, transfer_id), *args)
    return _money_movement_result(resp, Refund)


async def list_refunds(client: MoovClient, transfer_id: str) -> list[Refund]:
    resp = await client.call_http(endpoint("GET", PATH_REFUNDS, transfer_id), accept_json())
    return completed_list_or_error(resp, Refund)


async def get_refund(client: MoovClient, transfer_id: str, refund_id: str) -> Refund:
    resp = await client.call_http(endpoint("GET", PATH_REFUND, transfer_id, refund_id), accept_json())
    return completed_object_or_error(resp, Refund)


async def reverse_transfer(client: MoovClient, transfer_id: str, amount: Optional[int] = None) -> CanceledTransfer:
    """
    Reverse a transfer. Depending on how far it got, the API cancels it or
    refunds it; the result carries whichever happened.
    """
    resp = await client.call_http(
        endpoint("POST", PATH_REVERSALS, transfer_id),
        accept_json(),
        idempotency_key(),
        json_body(RefundPayload(amount=amount)),
    )
    return _money_movement_result(resp, CanceledTransfer)


def _money_movement_result(resp: CallResponse, model):
    # Refunds and reversals return their record whether or not the rail answered yet.
    if resp.status in (CallStatus.COMPLETED, CallStatus.STARTED):
        return unmarshal_object_response(resp, model)
    if resp.status is CallStatus.STATE_CONFLICT:
        raise _idempotency_error(resp)
    if resp.status is CallStatus.FAILED_VALIDATION:
        cause = resp.error()
        raise RequestBodyError(cause.message, status_code=cause.status_code)
    raise resp.error()


def _idempotency_error(resp: CallResponse) -> IdempotencyKeyError:
    return IdempotencyKeyError(status_code=resp.status_code)
