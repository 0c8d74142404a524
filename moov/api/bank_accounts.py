"""
Bank account endpoints, including micro-deposit verification.

POST   /accounts/{accountID}/bank-accounts
GET    /accounts/{accountID}/bank-accounts
GET    /accounts/{accountID}/bank-accounts/{bankAccountID}
DELETE /accounts/{accountID}/bank-accounts/{bankAccountID}
POST   /accounts/{accountID}/bank-accounts/{bankAccountID}/micro-deposits
PUT    /accounts/{accountID}/bank-accounts/{bankAccountID}/micro-deposits
"""

from moov.client import MoovClient
from moov.engine.call import accept_json, endpoint, json_body
from moov.engine.errors import AmountIncorrectError, DuplicateBankAccountError, NoMicroDepositError
from moov.engine.response import (
    completed_list_or_error,
    completed_none_or_error,
    completed_object_or_error,
    unmarshal_object_response,
)
from moov.models.bank_account import BankAccount, BankAccountPayload, MicroDepositConfirmation
from moov.models.enums import CallStatus

PATH_BANK_ACCOUNTS = "/accounts/%s/bank-accounts"
PATH_BANK_ACCOUNT = "/accounts/%s/bank-accounts/%s"
PATH_MICRO_DEPOSITS = "/accounts/%s/bank-accounts/%s/micro-deposits"


async def create_bank_account(client: MoovClient, account_id: str, bank_account: BankAccount) -> BankAccount:
    """
    Link a bank account to ``account_id``.

    Raises:
        DuplicateBankAccountError: Already linked, or the routing number is invalid.
    """
    resp = await client.call_http(
        endpoint("POST", PATH_BANK_ACCOUNTS, account_id),
        accept_json(),
        json_body(BankAccountPayload(account=bank_account)),
    )

    if resp.status is CallStatus.COMPLETED:
        return unmarshal_object_response(resp, BankAccount)
    if resp.status is CallStatus.STATE_CONFLICT:
        raise DuplicateBankAccountError(status_code=resp.status_code)
    raise resp.error()


async def get_bank_account(client: MoovClient, account_id: str, bank_account_id: str) -> BankAccount:
    resp = await client.call_http(
        endpoint("GET", PATH_BANK_ACCOUNT, account_id, bank_account_id),
        accept_json(),
    )
    return completed_object_or_error(resp, BankAccount)


async def delete_bank_account(client: MoovClient, account_id: str, bank_account_id: str) -> None:
    resp = await client.call_http(endpoint("DELETE", PATH_BANK_ACCOUNT, account_id, bank_account_id))
    completed_none_or_error(resp)


async def list_bank_accounts(client: MoovClient, account_id: str) -> list[BankAccount]:
    resp = await client.call_http(
        endpoint("GET", PATH_BANK_ACCOUNTS, account_id),
        accept_json(),
    )
    return completed_list_or_error(resp, BankAccount)


async def micro_deposit_initiate(client: MoovClient, account_id: str, bank_account_id: str) -> None:
    """Send two small deposits to the bank account so its holder can prove ownership."""
    resp = await client.call_http(endpoint("POST", PATH_MICRO_DEPOSITS, account_id, bank_account_id))
    completed_none_or_error(resp)


async def micro_deposit_confirm(
    client: MoovClient,
    account_id: str,
    bank_account_id: str,
    amounts: list[int],
) -> None:
    """
    Confirm the micro-deposit amounts (in cents) the holder saw on their statement.

    Raises:
        NoMicroDepositError: Unknown account, or no micro-deposits were sent.
        AmountIncorrectError: The amounts do not match.
    """
    resp = await client.call_http(
        endpoint("PUT", PATH_MICRO_DEPOSITS, account_id, bank_account_id),
        accept_json(),
        json_body(MicroDepositConfirmation(amounts=amounts)),
    )

    if resp.status is CallStatus.COMPLETED:
        return
    if resp.status is CallStatus.NOT_FOUND:
        raise NoMicroDepositError(status_code=resp.status_code)
    if resp.status is CallStatus.STATE_CONFLICT:
        raise AmountIncorrectError(status_code=resp.status_code)
    raise resp.error()
