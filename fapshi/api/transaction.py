"""
Transaction queries and expiry.
"""
from __future__ import annotations

from urllib.parse import quote

from fapshi.api._codec import decode, decode_transactions, encode
from fapshi.dtos import ExpireRequest, TransactionSearchQuery, TransactionStatus
from fapshi.ports import Transport


PAYMENT_STATUS_PATH = "payment-status/{transaction_id}"
EXPIRE_PAY_PATH = "expire-pay"
USER_TRANSACTIONS_PATH = "transaction/{user_id}"
SEARCH_PATH = "transaction/search"


def _require_id(name: str, value: str) -> str:
    # An empty id would address a different endpoint
    if not value or not value.strip():
        raise ValueError(f"{name} must not be empty")
    return value


async def get_status(client: Transport, transaction_id: str) -> TransactionStatus:
    """Fetch the current status of one transaction."""
    _require_id("transaction_id", transaction_id)
    path = PAYMENT_STATUS_PATH.format(transaction_id=quote(transaction_id, safe=""))
    response = await client.get(path)
    return decode(response, TransactionStatus)


async def expire_transaction(client: Transport, transaction_id: str) -> None:
    """Expire a transaction so it can no longer be paid.

    An already expired or unknown transaction comes back as a non-2xx status
    and raises ``FapshiHttpError``.
    """
    _require_id("transaction_id", transaction_id)
    await client.post(EXPIRE_PAY_PATH, encode(ExpireRequest(transaction_id=transaction_id)))


async def get_transactions_by_user_id(client: Transport, user_id: str) -> list[TransactionStatus]:
    """All transactions tagged with ``user_id``, in the provider's order."""
    _require_id("user_id", user_id)
    path = USER_TRANSACTIONS_PATH.format(user_id=quote(user_id, safe=""))
    response = await client.get(path)
    return decode_transactions(response)


async def search_transactions(
    client: Transport, query: TransactionSearchQuery
) -> list[TransactionStatus]:
    """Transactions matching the filters set on ``query``."""
    response = await client.get(SEARCH_PATH, params=query.to_params())
    return decode_transactions(response)
