"""
Exceptions raised by the client.

Transport failures (DNS, connection resets, timeouts) are not wrapped:
they surface as the ``httpx`` exception that caused them, so callers
cannot mistake them for a classified API verdict.

Every API verdict other than success is a ``CallError`` that carries its
``CallStatus`` and therefore its ``retryable`` flag. Endpoints that know a
status means something more specific in their context raise one of the
named subclasses at the bottom of this module instead.
"""

from typing import Optional

from moov.models.enums import CallStatus


class MoovError(Exception):
    """Base exception for everything raised by this package."""


class CredentialsNotSetError(MoovError):
    def __init__(self, message: str = "MOOV_PUBLIC_KEY and MOOV_SECRET_KEY must both be set"):
        super().__init__(message)


class DecodeError(MoovError):
    """Response body did not match the expected shape."""


class CallError(MoovError):
    """The API answered, and the answer was not a success."""

    default_status = CallStatus.SERVER_ERROR
    default_message = ""

    def __init__(
        self,
        message: Optional[str] = None,
        status: Optional[CallStatus] = None,
        status_code: Optional[int] = None,
    ):
        self.status = status or self.default_status
        self.status_code = status_code
        self.message = message or self.default_message or self.status.label
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        return self.status.retryable

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status={self.status.label}, http={self.status_code})"


class BadRequestError(CallError):
    default_status = CallStatus.BAD_REQUEST


class StateConflictError(CallError):
    default_status = CallStatus.STATE_CONFLICT


class FailedValidationError(CallError):
    default_status = CallStatus.FAILED_VALIDATION


class NotFoundError(CallError):
    default_status = CallStatus.NOT_FOUND


class UnauthenticatedError(CallError):
    default_status = CallStatus.UNAUTHENTICATED


class UnauthorizedError(CallError):
    default_status = CallStatus.UNAUTHORIZED


class RateLimitError(CallError):
    default_status = CallStatus.RATE_LIMITED

    def __init__(
        self,
        message: Optional[str] = None,
        status: Optional[CallStatus] = None,
        status_code: Optional[int] = None,
        retry_after: Optional[float] = None,
    ):
        super().__init__(message, status=status, status_code=status_code)
        self.retry_after = retry_after


class ServerError(CallError):
    default_status = CallStatus.SERVER_ERROR


ERRORS_BY_STATUS: dict[CallStatus, type[CallError]] = {
    CallStatus.BAD_REQUEST: BadRequestError,
    CallStatus.STATE_CONFLICT: StateConflictError,
    CallStatus.FAILED_VALIDATION: FailedValidationError,
    CallStatus.NOT_FOUND: NotFoundError,
    CallStatus.UNAUTHENTICATED: UnauthenticatedError,
    CallStatus.UNAUTHORIZED: UnauthorizedError,
    CallStatus.RATE_LIMITED: RateLimitError,
    CallStatus.SERVER_ERROR: ServerError,
}


# Endpoint-specific meanings


class DuplicateBankAccountError(StateConflictError):
    default_message = "duplicate bank account or invalid routing number"


class NoMicroDepositError(NotFoundError):
    default_message = (
        "no account with the specified accountID was found "
        "or micro-deposits have not been sent for the source"
    )


class AmountIncorrectError(StateConflictError):
    default_message = "micro-deposit amounts are incorrect"


class IdempotencyKeyError(StateConflictError):
    default_message = "attempted to reuse an X-Idempotency-Key with a different request"


class RequestBodyError(FailedValidationError):
    default_message = "request body failed validation"
