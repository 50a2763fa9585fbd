"""
Webhook registration.
"""
from __future__ import annotations

from fapshi.dtos import WebhookConfig
from fapshi.ports import Transport


async def configure_webhook(client: Transport, config: WebhookConfig) -> None:
    """POST an empty JSON object to ``config.url``.

    The URL is used as given, not joined to the API base URL.
    """
    await client.post(config.url, "{}")
