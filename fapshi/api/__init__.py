"""
Resource APIs. Each function takes a ``Transport`` (usually a ``FapshiClient``)
and performs one request.
"""
from .payment import create_payment, initiate_direct_payment
from .transaction import (
    get_status,
    expire_transaction,
    get_transactions_by_user_id,
    search_transactions,
)
from .webhook import configure_webhook
from .balance import get_service_balance
from .payout import send_payout

__all__ = [
    "create_payment",
    "initiate_direct_payment",
    "get_status",
    "expire_transaction",
    "get_transactions_by_user_id",
    "search_transactions",
    "configure_webhook",
    "get_service_balance",
    "send_payout",
]
