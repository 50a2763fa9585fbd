"""
Payouts: send money from the service balance to a mobile wallet.
"""
from __future__ import annotations

from fapshi.api._codec import decode, encode
from fapshi.dtos import PayoutRequest, PayoutResponse
from fapshi.ports import Transport


PAYOUT_PATH = "payout"


async def send_payout(client: Transport, request: PayoutRequest) -> PayoutResponse:
    response = await client.post(PAYOUT_PATH, encode(request))
    return decode(response, PayoutResponse)
