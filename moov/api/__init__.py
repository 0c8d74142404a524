from moov.api.bank_accounts import (
    create_bank_account,
    delete_bank_account,
    get_bank_account,
    list_bank_accounts,
    micro_deposit_confirm,
    micro_deposit_initiate,
)
from moov.api.disputes import get_dispute, list_disputes
from moov.api.transfers import (
    create_transfer,
    get_refund,
    get_transfer,
    list_refunds,
    list_transfers,
    refund_transfer,
    reverse_transfer,
    transfer_options,
    update_transfer_metadata,
)

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
]
