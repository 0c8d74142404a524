"""Enumerations for the Moov API domain model."""

from enum import Enum


class CallStatus(Enum):
    """
    Semantic outcome of a single API call.

    Several HTTP status codes classify to the same member, so retry
    decisions must read ``retryable`` instead of the raw status code.
    """

    COMPLETED = ("completed", False)  # Fully processed, body holds the result
    STARTED = ("started", True)  # Accepted as async, either by request or because the rail timed out

    BAD_REQUEST = ("bad_request", False)  # Malformed body, headers or parameters
    STATE_CONFLICT = ("state_conflict", False)  # Violates a stateful constraint
    FAILED_VALIDATION = ("failed_validation", False)  # Well-formed but rejected by validation
    NOT_FOUND = ("not_found", False)

    UNAUTHENTICATED = ("unauthenticated", False)  # Credentials missing or expired
    UNAUTHORIZED = ("unauthorized", False)  # Not allowed, or invalid method/url

    RATE_LIMITED = ("rate_limited", True)

    SERVER_ERROR = ("server_error", True)

    def __init__(self, label: str, retryable: bool):
        self.label = label
        self.retryable = retryable

    def __str__(self) -> str:
        return self.label


class TransferStatus(str, Enum):
    """Lifecycle states of a transfer."""

    CREATED = "created"
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REVERSED = "reversed"
    QUEUED = "queued"
    CANCELED = "canceled"


class PaymentMethodType(str, Enum):
    """Tag carried by a transfer source or destination."""

    MOOV_WALLET = "moov-wallet"
    ACH_DEBIT_FUND = "ach-debit-fund"
    ACH_DEBIT_COLLECT = "ach-debit-collect"
    ACH_CREDIT_STANDARD = "ach-credit-standard"
    ACH_CREDIT_SAME_DAY = "ach-credit-same-day"
    RTP_CREDIT = "rtp-credit"
    CARD_PAYMENT = "card-payment"
    APPLE_PAY = "apple-pay"


class BankAccountStatus(str, Enum):
    NEW = "new"
    VERIFIED = "verified"
    VERIFICATION_FAILED = "verificationFailed"
    PENDING = "pending"
    ERRORED = "errored"


class DisputeStatus(str, Enum):
    RESPONSE_NEEDED = "response-needed"
    RESOLVED = "resolved"
    UNDER_REVIEW = "under-review"
    CLOSED = "closed"
    ACCEPTED = "accepted"
    WON = "won"
    LOST = "lost"


# Header value asking the API to hold the response until the rail answers.
WAIT_FOR_RAIL_RESPONSE = "rail-response"
