"""Best-effort delivery of channel payloads."""

import logging
from typing import AsyncIterator

import httpx

from teamsrelay.channels import ChannelPayload

logger = logging.getLogger(__name__)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Outbound HTTP client dependency. Uses httpx's default timeout."""
    async with httpx.AsyncClient() as client:
        yield client


async def deliver(payload: ChannelPayload, client: httpx.AsyncClient) -> bool:
    """
    Send a single notification via HTTP.

    Failures are logged and reported as ``False``; nothing is raised and
    nothing is retried.

    Args:
        payload: ChannelPayload instance
        client: Outbound HTTP client
    """
    try:
        response = await client.request(
            method=payload.method,
            url=payload.url,
            headers=payload.headers,
            content=payload.body,
        )
    except Exception as e:
        logger.error(f"Failed to deliver notification: {e}", exc_info=True)
        return False

    if response.status_code >= 400:
        logger.warning(
            f"Webhook returned status {response.status_code}: {response.text[:200]}"
        )
        return False

    logger.debug("Successfully delivered notification")
    return True
