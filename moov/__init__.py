"""
Typed async client for the Moov payments API.

    from moov import MoovClient, create_transfer

    async with MoovClient() as client:
        sync, pending = await create_transfer(client, transfer, is_sync=True)

Credentials and the base URL come from ``MOOV_*`` environment variables
(see ``moov.config.Settings``) unless passed explicitly.
"""

from moov.api import (
    create_bank_account,
    create_transfer,
    delete_bank_account,
    get_bank_account,
    get_dispute,
    get_refund,
    get_transfer,
    list_bank_accounts,
    list_disputes,
    list_refunds,
    list_transfers,
    micro_deposit_confirm,
    micro_deposit_initiate,
    refund_transfer,
    reverse_transfer,
    transfer_options,
    update_transfer_metadata,
)
from moov.client import Credentials, MoovClient
from moov.config import Settings, configure_logging
from moov.engine.errors import (
    AmountIncorrectError,
    BadRequestError,
    CallError,
    CredentialsNotSetError,
    DecodeError,
    DuplicateBankAccountError,
    FailedValidationError,
    IdempotencyKeyError,
    MoovError,
    NoMicroDepositError,
    NotFoundError,
    RateLimitError,
    RequestBodyError,
    ServerError,
    StateConflictError,
    UnauthenticatedError,
    UnauthorizedError,
)
from moov.engine.retry import with_retry
from moov.models.enums import CallStatus

__version__ = "0.1.0"

__all__ = [
    "create_transfer",
    "list_transfers",
    "get_transfer",
    "update_transfer_metadata",
    "transfer_options",
    "refund_transfer",
    "list_refunds",
    "get_refund",
    "reverse_transfer",
    "create_bank_account",
    "get_bank_account",
    "delete_bank_account",
    "list_bank_accounts",
    "micro_deposit_initiate",
    "micro_deposit_confirm",
    "list_disputes",
    "get_dispute",
    "MoovClient",
    "Credentials",
    "Settings",
    "configure_logging",
    "with_retry",
    "CallStatus",
    "MoovError",
    "CallError",
    "CredentialsNotSetError",
    "DecodeError",
    "BadRequestError",
    "StateConflictError",
    "FailedValidationError",
    "NotFoundError",
    "UnauthenticatedError",
    "UnauthorizedError",
    "RateLimitError",
    "ServerError",
    "DuplicateBankAccountError",
    "NoMicroDepositError",
    "AmountIncorrectError",
    "IdempotencyKeyError",
    "RequestBodyError",
]
