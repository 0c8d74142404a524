from moov.models.bank_account import (
    AchDetails,
    ACHStatusUpdates,
    BankAccount,
    BankAccountPayload,
    Correction,
    MicroDepositConfirmation,
    Return,
)
from moov.models.common import Amount, MoovModel
from moov.models.dispute import Dispute, DisputeListFilter, DisputeTransfer
from moov.models.enums import BankAccountStatus, CallStatus, DisputeStatus, PaymentMethodType, TransferStatus
from moov.models.transfer import (
    ApplePay,
    AsynchronousTransfer,
    CanceledTransfer,
    Card,
    CardDetails,
    CardExpiration,
    CardStatusUpdates,
    CreatedTransferOptions,
    CreateTransfer,
    Destination,
    FacilitatorFee,
    MetadataPayload,
    MoovFeeDetails,
    Refund,
    RefundPayload,
    RefundStatus,
    SearchQueryPayload,
    Source,
    SynchronousTransfer,
    TransferAccount,
    TransferOptionsDestinationPayload,
    TransferOptionsPayload,
    TransferOptionsSourcePayload,
    Wallet,
)

__all__ = [
    "MoovModel",
    "Amount",
    "BankAccount",
    "BankAccountPayload",
    "MicroDepositConfirmation",
    "AchDetails",
    "ACHStatusUpdates",
    "Correction",
    "Return",
    "Dispute",
    "DisputeListFilter",
    "DisputeTransfer",
    "SynchronousTransfer",
    "AsynchronousTransfer",
    "CreateTransfer",
    "CanceledTransfer",
    "CreatedTransferOptions",
    "TransferOptionsPayload",
    "TransferOptionsSourcePayload",
    "TransferOptionsDestinationPayload",
    "SearchQueryPayload",
    "MetadataPayload",
    "Refund",
    "RefundPayload",
    "RefundStatus",
    "Source",
    "Destination",
    "TransferAccount",
    "Wallet",
    "Card",
    "CardExpiration",
    "CardDetails",
    "CardStatusUpdates",
    "ApplePay",
    "FacilitatorFee",
    "MoovFeeDetails",
    "CallStatus",
    "TransferStatus",
    "PaymentMethodType",
    "BankAccountStatus",
    "DisputeStatus",
]
