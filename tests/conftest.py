"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config import settings  # noqa: E402


def sse_event(content=None, raw=None) -> str:
    """Build one SSE event line in the gateway's chunk format."""
    if raw is not None:
        return f"data: {raw}\n\n"
    return "data: " + json.dumps({"choices": [{"delta": {"content": content}}]}, ensure_ascii=False) + "\n\n"


def sse_body(*deltas, done=True) -> bytes:
    body = "".join(sse_event(d) for d in deltas)
    if done:
        body += sse_event(raw="[DONE]")
    return body.encode("utf-8")


@pytest.fixture
def api_key(monkeypatch):
    """Configure a gateway credential for the test."""
    monkeypatch.setattr(settings, "AI_GATEWAY_API_KEY", "test-key")
    return "test-key"


async def streamed(*parts: bytes):
    """Async body for httpx.Response so the mocked upstream streams instead of arriving pre-read."""
    for part in parts:
        yield part
