"""
Payment DTOs: payment links, direct (mobile) payments and payouts.
"""
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from fapshi.dtos.base import WireModel


class PaymentRequest(WireModel):
    """Body of ``initiate-pay``.

    The provider enforces a minimum amount; only positivity is checked here.
    Setting ``email`` skips the email prompt on the payment page.
    """

    amount: float = Field(gt=0)
    message: str
    email: Optional[str] = None
    redirect_url: Optional[str] = None
    # order id or anything else used to reconcile the payment on the caller's side
    external_id: Optional[str] = None
    user_id: Optional[str] = None
    card_only: Optional[bool] = None

    @field_validator("message")
    @classmethod
    def _require_message(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("message must not be empty")
        return v


class PaymentResponse(WireModel):
    """Result of ``initiate-pay``. The link is valid for 24 hours."""

    message: Optional[str] = None
    payment_link: str = Field(alias="link")
    transaction_id: str = Field(alias="transId")
    date_initiated: Optional[str] = None


class DirectPaymentRequest(WireModel):
    """Body of ``direct-pay``: pushes a payment prompt to ``phone``.

    ``medium`` is "mobile money" or "orange money"; the provider picks one
    from the number when it is omitted.
    """

    amount: float = Field(gt=0)
    phone: str
    medium: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    user_id: Optional[str] = None
    external_id: Optional[str] = None
    message: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def _require_phone(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("phone must not be empty")
        return v


class DirectPaymentResponse(WireModel):
    message: Optional[str] = None
    transaction_id: str = Field(alias="transId")
    date_initiated: Optional[str] = None


class PayoutRequest(WireModel):
    """Body of ``payout``: sends ``amount`` to the phone's wallet."""

    amount: float = Field(gt=0)
    phone: str
    medium: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    user_id: Optional[str] = None
    external_id: Optional[str] = None
    message: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def _require_phone(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("phone must not be empty")
        return v


class PayoutResponse(WireModel):
    message: Optional[str] = None
    transaction_id: str = Field(alias="transId")
    date_initiated: Optional[str] = None
