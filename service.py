import logging
from typing import Tuple

from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask

from ai_context import build_gateway_payload
from config import settings
from gateway_client import (
    GatewayConfigError,
    GatewayStatusError,
    GatewayTimeoutError,
    open_chat_stream,
)
from prompts import resolve_language, resolve_mode
from schemas import ChatRequest, ErrorResponse

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
PAYMENT_REQUIRED_MESSAGE = "Payment required. Please add credits to your workspace."
TIMEOUT_MESSAGE = "AI gateway request timed out"


def map_upstream_status(status_code: int) -> Tuple[int, str]:
    """
    Translate a non-success gateway status into the caller-facing status and message.

    429 and 402 pass through, everything else becomes 500 with the upstream code.
    """
    if status_code == 429:
        return 429, RATE_LIMIT_MESSAGE
    if status_code == 402:
        return 402, PAYMENT_REQUIRED_MESSAGE
    return 500, f"AI gateway error: {status_code}"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=settings.CORS_HEADERS,
    )


async def relay_chat(request: ChatRequest):
    """
    Forward a conversation to the AI gateway and relay its event stream.

    Args:
        request: Conversation history, locale, mode and optional caller profile

    Returns:
        StreamingResponse with the upstream bytes, or JSONResponse {"error"} on failure
    """
    logger.info(
        f"[LOGIC] Relaying {len(request.messages)} messages, "
        f"language={resolve_language(request.language)}, mode={resolve_mode(request.mode)}"
    )

    try:
        payload = build_gateway_payload(request)
        stream = await open_chat_stream(payload)
    except GatewayConfigError as e:
        logger.error(f"[ERROR] {e}")
        return error_response(500, str(e))
    except GatewayStatusError as e:
        status_code, message = map_upstream_status(e.status_code)
        return error_response(status_code, message)
    except GatewayTimeoutError:
        return error_response(504, TIMEOUT_MESSAGE)
    except Exception as e:
        logger.error(f"[ERROR] Chat relay failed: {str(e)}")
        return error_response(500, str(e) or "Unknown error")

    logger.info("[SUCCESS] Streaming response from AI gateway")
    return StreamingResponse(
        stream.aiter_bytes(),
        media_type="text/event-stream",
        headers=settings.CORS_HEADERS,
        background=BackgroundTask(stream.aclose),
    )
