import asyncio
import logging
from typing import AsyncIterator, Dict

import httpx

from config import settings

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for AI gateway failures."""

class GatewayConfigError(GatewayError):
    """The gateway credential is not configured."""

class GatewayStatusError(GatewayError):
    """The gateway answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"AI gateway error: {status_code}")
        self.status_code = status_code
        self.body = body

class GatewayTimeoutError(GatewayError):
    """The gateway did not respond within the configured budget."""


def get_http_client() -> httpx.AsyncClient:
    """Create the HTTP client used for one gateway call."""
    # The overall budget is enforced by cancellation, not by httpx read timeouts
    return httpx.AsyncClient(timeout=None)


class GatewayStream:
    """An open streaming response from the gateway. Owns its client until closed."""

    def __init__(self, client: httpx.AsyncClient, response: httpx.Response):
        self._client = client
        self.response = response

    async def aiter_bytes(self) -> AsyncIterator[bytes]:
        """Yield the decoded body; upstream content encodings are never forwarded."""
        try:
            async for chunk in self.response.aiter_bytes():
                yield chunk
        finally:
            await self.aclose()

    async def aclose(self):
        await self.response.aclose()
        await self._client.aclose()


async def open_chat_stream(payload: Dict) -> GatewayStream:
    """
    Send a streaming chat-completion request to the AI gateway.

    Args:
        payload: Request body with model, messages and stream flag

    Returns:
        GatewayStream positioned at the start of the event stream

    Raises:
        GatewayConfigError: credential missing
        GatewayTimeoutError: no response within AI_TIMEOUT_SECONDS
        GatewayStatusError: non-success upstream status
    """
    if not settings.AI_GATEWAY_API_KEY:
        raise GatewayConfigError("AI_GATEWAY_API_KEY is not configured")

    client = get_http_client()
    request = client.build_request(
        "POST",
        settings.AI_GATEWAY_URL,
        headers={
            "Authorization": f"Bearer {settings.AI_GATEWAY_API_KEY}",
            "Content-Type": "application/json",
        },
        json=payload,
    )

    try:
        response = await asyncio.wait_for(
            client.send(request, stream=True),
            timeout=settings.AI_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        await client.aclose()
        logger.error(f"[ERROR] AI gateway timed out after {settings.AI_TIMEOUT_SECONDS}s")
        raise GatewayTimeoutError("AI gateway request timed out")
    except BaseException:
        await client.aclose()
        raise

    if not response.is_success:
        body = (await response.aread()).decode("utf-8", errors="replace")
        await response.aclose()
        await client.aclose()
        logger.error(f"[ERROR] AI gateway error: {response.status_code} {body}")
        raise GatewayStatusError(response.status_code, body)

    return GatewayStream(client, response)
