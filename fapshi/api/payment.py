"""
Payment links and direct mobile payments.
"""
from __future__ import annotations

from fapshi.api._codec import decode, encode
from fapshi.dtos import (
    DirectPaymentRequest,
    DirectPaymentResponse,
    PaymentRequest,
    PaymentResponse,
)
from fapshi.ports import Transport


INITIATE_PAY_PATH = "initiate-pay"
DIRECT_PAY_PATH = "direct-pay"


async def create_payment(client: Transport, request: PaymentRequest) -> PaymentResponse:
    """Create a payment link the payer opens in a browser.

    Raises:
        SerializationError: the request or response could not be (de)serialized
        FapshiHttpError: the request failed or returned a non-2xx status
    """
    response = await client.post(INITIATE_PAY_PATH, encode(request))
    return decode(response, PaymentResponse)


async def initiate_direct_payment(
    client: Transport, request: DirectPaymentRequest
) -> DirectPaymentResponse:
    """Push a payment prompt to the payer's mobile wallet."""
    response = await client.post(DIRECT_PAY_PATH, encode(request))
    return decode(response, DirectPaymentResponse)
