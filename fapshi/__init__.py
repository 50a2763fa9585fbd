"""
Async client for the Fapshi payment API.

    from fapshi import FapshiClient, PaymentRequest, create_payment

    async with FapshiClient(api_user, api_key, sandbox=True) as client:
        payment = await create_payment(client, PaymentRequest(amount=500, message="Order 42"))
        print(payment.payment_link)
"""
from .client import FapshiClient, SANDBOX_BASE_URL, LIVE_BASE_URL
from .ports import Transport
from .core import (
    FapshiSettings,
    get_settings,
    FapshiError,
    FapshiHttpError,
    HeaderValidationError,
    FapshiApiError,
    SerializationError,
)
from .dtos import (
    PaymentRequest,
    PaymentResponse,
    DirectPaymentRequest,
    DirectPaymentResponse,
    PayoutRequest,
    PayoutResponse,
    Status,
    TransactionStatus,
    TransactionSearchQuery,
    WebhookConfig,
    ServiceBalance,
)
from .api import (
    create_payment,
    initiate_direct_payment,
    get_status,
    expire_transaction,
    get_transactions_by_user_id,
    search_transactions,
    configure_webhook,
    get_service_balance,
    send_payout,
)

__version__ = "0.1.0"

__all__ = [
    "FapshiClient",
    "SANDBOX_BASE_URL",
    "LIVE_BASE_URL",
    "Transport",
    "FapshiSettings",
    "get_settings",
    "FapshiError",
    "FapshiHttpError",
    "HeaderValidationError",
    "FapshiApiError",
    "SerializationError",
    "PaymentRequest",
    "PaymentResponse",
    "DirectPaymentRequest",
    "DirectPaymentResponse",
    "PayoutRequest",
    "PayoutResponse",
    "Status",
    "TransactionStatus",
    "TransactionSearchQuery",
    "WebhookConfig",
    "ServiceBalance",
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
