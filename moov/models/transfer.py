"""
Transfer, refund and reversal models.

A transfer moves an ``Amount`` from a ``Source`` to a ``Destination``.
Both ends are tagged with a payment method type (see
``PaymentMethodType``) and carry the payload for that method: a bank
account, a wallet, a card or Apple Pay, plus rail details once the
transfer is in flight.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from moov.models.bank_account import AchDetails, BankAccount
from moov.models.common import Amount, MoovModel
from moov.models.dispute import Dispute


class FacilitatorFee(MoovModel):
    total: Optional[int] = None
    total_decimal: Optional[str] = None
    markup: Optional[int] = None
    markup_decimal: Optional[str] = None


class MoovFeeDetails(MoovModel):
    card_scheme: Optional[str] = None
    interchange: Optional[str] = None
    moov_processing: Optional[str] = None


class TransferAccount(MoovModel):
    account_id: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None


class Wallet(MoovModel):
    wallet_id: Optional[str] = None


class CardExpiration(MoovModel):
    month: Optional[str] = None
    year: Optional[str] = None


class Card(MoovModel):
    card_id: Optional[str] = None
    fingerprint: Optional[str] = None
    brand: Optional[str] = None
    card_type: Optional[str] = None
    last_four_card_number: Optional[str] = None
    bin: Optional[str] = None
    expiration: Optional[CardExpiration] = None
    holder_name: Optional[str] = None
    issuer: Optional[str] = None
    issuer_country: Optional[str] = None


class ApplePay(MoovModel):
    brand: Optional[str] = None
    card_type: Optional[str] = None
    card_display_name: Optional[str] = None
    fingerprint: Optional[str] = None
    expiration: Optional[CardExpiration] = None
    dynamic_last_four: Optional[str] = None


class CardStatusUpdates(MoovModel):
    initiated: Optional[datetime] = None
    confirmed: Optional[datetime] = None
    settled: Optional[datetime] = None
    failed: Optional[datetime] = None
    canceled: Optional[datetime] = None
    completed: Optional[datetime] = None


class CardDetails(MoovModel):
    status: Optional[str] = None
    failure_code: Optional[str] = None
    dynamic_descriptor: Optional[str] = None
    transaction_source: Optional[str] = None
    status_updates: Optional[CardStatusUpdates] = None


class Source(MoovModel):
    payment_method_id: Optional[str] = None
    payment_method_type: Optional[str] = None  # PaymentMethodType
    account: Optional[TransferAccount] = None
    bank_account: Optional[BankAccount] = None
    wallet: Optional[Wallet] = None
    card: Optional[Card] = None
    apple_pay: Optional[ApplePay] = None
    ach_details: Optional[AchDetails] = None
    card_details: Optional[CardDetails] = None
    transfer_id: Optional[str] = None  # Set when funded by a prior transfer


class Destination(MoovModel):
    payment_method_id: Optional[str] = None
    payment_method_type: Optional[str] = None  # PaymentMethodType
    account: Optional[TransferAccount] = None
    bank_account: Optional[BankAccount] = None
    wallet: Optional[Wallet] = None
    card: Optional[Card] = None
    apple_pay: Optional[ApplePay] = None
    ach_details: Optional[AchDetails] = None
    card_details: Optional[CardDetails] = None


class Refund(MoovModel):
    refund_id: Optional[str] = None
    created_on: Optional[datetime] = None
    updated_on: Optional[datetime] = None
    status: Optional[str] = None
    failure_code: Optional[str] = None
    amount: Optional[Amount] = None
    card_details: Optional[CardDetails] = None


class SynchronousTransfer(MoovModel):
    """Full transfer record, returned once the rail has responded."""

    transfer_id: Optional[str] = None
    created_on: Optional[datetime] = None
    completed_on: Optional[datetime] = None
    status: Optional[str] = None  # TransferStatus
    failure_reason: Optional[str] = None
    amount: Optional[Amount] = None
    description: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    facilitator_fee: Optional[FacilitatorFee] = None
    moov_fee: Optional[int] = None
    moov_fee_decimal: Optional[str] = None
    moov_fee_details: Optional[MoovFeeDetails] = None
    group_id: Optional[str] = None
    refunded_amount: Optional[Amount] = None
    refunds: Optional[list[Refund]] = None
    disputed_amount: Optional[Amount] = None
    disputes: Optional[list[Dispute]] = None
    source: Optional[Source] = None
    destination: Optional[Destination] = None


class AsynchronousTransfer(MoovModel):
    """Handle returned when the transfer was accepted but not yet resolved."""

    transfer_id: Optional[str] = None
    created_on: Optional[datetime] = None


class CreateTransfer(MoovModel):
    source: Source
    destination: Destination
    amount: Amount
    facilitator_fee: Optional[FacilitatorFee] = None
    description: Optional[str] = None
    metadata: Optional[dict[str, str]] = None


class MetadataPayload(MoovModel):
    metadata: dict[str, str] = Field(default_factory=dict)


class RefundPayload(MoovModel):
    amount: Optional[int] = None  # Cents; omitted means the full amount


class TransferOptionsSourcePayload(MoovModel):
    payment_method_id: Optional[str] = None
    account_id: Optional[str] = None


class TransferOptionsDestinationPayload(MoovModel):
    payment_method_id: Optional[str] = None
    account_id: Optional[str] = None


class TransferOptionsPayload(MoovModel):
    source: TransferOptionsSourcePayload
    destination: TransferOptionsDestinationPayload
    amount: Amount


class CreatedTransferOptions(MoovModel):
    source_options: Optional[list[Source]] = None
    destination_options: Optional[list[Destination]] = None


class RefundStatus(MoovModel):
    status: Optional[str] = None
    created_on: Optional[datetime] = None


class CanceledTransfer(MoovModel):
    """Result of a reversal: either a cancellation or a refund."""

    cancellation: Optional[RefundStatus] = None
    refund: Optional[Refund] = None


class SearchQueryPayload(MoovModel):
    """Filters for listing transfers. Zero values are left out of the query."""

    account_ids: list[str] = Field(default_factory=list)
    status: str = ""
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    group_id: str = ""
    count: int = 0
    skip: int = 0
    refunded: bool = False
    disputed: bool = False

