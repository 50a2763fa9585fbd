"""
Wire models for the Fapshi API (pydantic v2).
"""
from .base import WireModel
from .payments import (
    PaymentRequest,
    PaymentResponse,
    DirectPaymentRequest,
    DirectPaymentResponse,
    PayoutRequest,
    PayoutResponse,
)
from .transactions import Status, TransactionStatus, ExpireRequest, TransactionSearchQuery
from .account import WebhookConfig, ServiceBalance

__all__ = [
    "WireModel",
    "PaymentRequest",
    "PaymentResponse",
    "DirectPaymentRequest",
    "DirectPaymentResponse",
    "PayoutRequest",
    "PayoutResponse",
    "Status",
    "TransactionStatus",
    "ExpireRequest",
    "TransactionSearchQuery",
    "WebhookConfig",
    "ServiceBalance",
]
