"""Bank account and ACH rail models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from moov.models.common import MoovModel


class BankAccount(MoovModel):
    """
    A bank account linked to a Moov account.

    ``account_number`` and ``routing_number`` are only sent on create;
    responses carry ``last_four_account_number`` instead.
    """

    bank_account_id: Optional[str] = None
    fingerprint: Optional[str] = None
    status: Optional[str] = None  # BankAccountStatus
    holder_name: Optional[str] = None
    holder_type: Optional[str] = None  # "individual" or "business"
    bank_name: Optional[str] = None
    bank_account_type: Optional[str] = None  # "checking" or "savings"
    account_number: Optional[str] = None
    routing_number: Optional[str] = None
    last_four_account_number: Optional[str] = None


class BankAccountPayload(MoovModel):
    """Request body for linking a bank account."""

    account: BankAccount


class MicroDepositConfirmation(MoovModel):
    amounts: list[int]  # Cents, in the order they were received


class Correction(MoovModel):
    code: Optional[str] = None
    reason: Optional[str] = None
    description: Optional[str] = None


class Return(MoovModel):
    code: Optional[str] = None
    reason: Optional[str] = None
    description: Optional[str] = None


class ACHStatusUpdates(MoovModel):
    initiated: Optional[datetime] = None
    originated: Optional[datetime] = None
    corrected: Optional[datetime] = None
    returned: Optional[datetime] = None
    completed: Optional[datetime] = None


class AchDetails(MoovModel):
    status: Optional[str] = None
    trace_number: Optional[str] = None
    return_: Optional[Return] = Field(default=None, alias="return")
    correction: Optional[Correction] = None
    company_entry_description: Optional[str] = None
    originating_company_name: Optional[str] = None
    status_updates: Optional[ACHStatusUpdates] = None
    debit_hold_period: Optional[str] = None  # e.g. "2-days"
