from __future__ import annotations

from fapshi.api._codec import decode
from fapshi.dtos import ServiceBalance
from fapshi.ports import Transport


BALANCE_PATH = "balance"


async def get_service_balance(client: Transport) -> ServiceBalance:
    """Current balance of the service account."""
    response = await client.get(BALANCE_PATH)
    return decode(response, ServiceBalance)
