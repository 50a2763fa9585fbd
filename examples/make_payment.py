"""Fapshi sandbox walkthrough.

Requires FAPSHI_API_USER and FAPSHI_API_KEY in the environment (or .env).
"""
from __future__ import annotations

import asyncio

from fapshi import (
    DirectPaymentRequest,
    FapshiClient,
    FapshiError,
    PaymentRequest,
    create_payment,
    expire_transaction,
    get_service_balance,
    get_status,
    get_transactions_by_user_id,
    initiate_direct_payment,
)
from fapshi.core.logging_config import configure_logging


async def main():
    configure_logging()

    async with FapshiClient.from_settings() as client:
        print("= Payment link =")
        payment = await create_payment(
            client,
            PaymentRequest(
                amount=100,
                message="Ticket for Saturday's match",
                email="payer@example.com",
                redirect_url="https://example.com/thanks",
                user_id="abcdef12345",
                external_id="order123",
            ),
        )
        print(f"Link: {payment.payment_link}")
        print(f"Transaction: {payment.transaction_id}")

        status = await get_status(client, payment.transaction_id)
        print(f"Status: {status.status.value}")

        await expire_transaction(client, payment.transaction_id)
        print(f"Transaction {payment.transaction_id} expired")

        print("\n= Direct payment =")
        try:
            direct = await initiate_direct_payment(
                client,
                DirectPaymentRequest(
                    amount=500,
                    phone="670000000",
                    medium="mobile money",
                    name="Test payer",
                    user_id="abcdef12345",
                    external_id="order124",
                    message="Direct payment test",
                ),
            )
            print(f"Transaction: {direct.transaction_id}")
        except FapshiError as exc:
            print(f"Direct payment rejected: {exc}")

        transactions = await get_transactions_by_user_id(client, "abcdef12345")
        print(f"\n{len(transactions)} transaction(s) for abcdef12345")
        for tx in transactions:
            print(f"  {tx.transaction_id} {tx.status.value} {tx.amount}")

        balance = await get_service_balance(client)
        print(f"\nBalance: {balance.balance} {balance.currency}")


if __name__ == "__main__":
    asyncio.run(main())
