"""Card dispute models."""

from datetime import datetime
from typing import Optional

from moov.models.common import Amount, MoovModel


class DisputeTransfer(MoovModel):
    transfer_id: Optional[str] = None


class Dispute(MoovModel):
    dispute_id: Optional[str] = None
    created_on: Optional[datetime] = None
    amount: Optional[Amount] = None
    network_reason_code: Optional[str] = None
    network_reason_description: Optional[str] = None
    respond_by: Optional[datetime] = None
    status: Optional[str] = None  # DisputeStatus
    transfer: Optional[DisputeTransfer] = None


class DisputeListFilter(MoovModel):
    """Filters for listing disputes. Zero values are left out of the query."""

    count: int = 0
    skip: int = 0
    respond_start_date_time: Optional[datetime] = None
    respond_end_date_time: Optional[datetime] = None
    status: str = ""
    merchant_account_id: str = ""
    cardholder_account_id: str = ""
    start_date_time: Optional[datetime] = None
    end_date_time: Optional[datetime] = None
    order_by: str = ""
