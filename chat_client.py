"""
Chat client for the DataHub AI relay.

Keeps one conversation, sends it to /ai-chat and streams the reply into the
conversation as it arrives. Run directly for a terminal chat:

    python chat_client.py
"""

import asyncio
import logging
from typing import Callable, Dict, List, Optional

import httpx

from config import settings
from conversation import Conversation
from models import InteractionMode, NotificationKind
from prompts import get_suggested_questions, get_welcome_message, resolve_language, resolve_mode
from schemas import CallerProfile, ModerationResult
from stream_consumer import StreamConsumer

logger = logging.getLogger(__name__)

NOTIFICATION_MESSAGES = {
    NotificationKind.RATE_LIMIT: "Too many requests. Please wait a moment and try again.",
    NotificationKind.PAYMENT_REQUIRED: "The AI service is temporarily unavailable (payment required).",
    NotificationKind.SERVICE_ERROR: "The AI service returned an error.",
    NotificationKind.REQUEST_FAILED: "Failed to get a response. Please try again.",
}


class RelayError(Exception):
    """The relay answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @property
    def kind(self) -> NotificationKind:
        if self.status_code == 429:
            return NotificationKind.RATE_LIMIT
        if self.status_code == 402:
            return NotificationKind.PAYMENT_REQUIRED
        return NotificationKind.SERVICE_ERROR


def get_http_client(base_url: Optional[str] = None) -> httpx.AsyncClient:
    """Create the HTTP client used to talk to the relay."""
    return httpx.AsyncClient(base_url=base_url or settings.RELAY_URL, timeout=None)


async def _error_message(response: httpx.Response) -> str:
    body = await response.aread()
    try:
        return response.json().get("error") or f"HTTP {response.status_code}"
    except (ValueError, AttributeError):
        return body.decode("utf-8", errors="replace") or f"HTTP {response.status_code}"


async def moderate_content(text: str, type: Optional[str] = None, client: Optional[httpx.AsyncClient] = None) -> ModerationResult:
    """
    Ask the relay whether text is acceptable.

    Fails open: any error is treated as clean content.
    """
    if not text or not text.strip():
        return ModerationResult(is_clean=True)

    owns_client = client is None
    client = client or get_http_client()
    try:
        response = await client.post("/moderate-content", json={"text": text, "type": type})
        response.raise_for_status()
        return ModerationResult.model_validate(response.json())
    except Exception as e:
        logger.error(f"[ERROR] Content moderation failed: {str(e)}")
        return ModerationResult(is_clean=True)
    finally:
        if owns_client:
            await client.aclose()


class ChatSession:
    """
    State of one chat window: locale, mode, profile, messages, loading flag.

    `notify(kind, message)` is called for every failure shown to the user.
    `on_change(conversation)` is called after every change to the messages.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        mode: str = InteractionMode.GENERAL.value,
        profile: Optional[CallerProfile] = None,
        client: Optional[httpx.AsyncClient] = None,
        notify: Optional[Callable[[NotificationKind, str], None]] = None,
        on_change: Optional[Callable[[Conversation], None]] = None,
    ):
        self.language = language or settings.DEFAULT_LANGUAGE
        self.mode = mode
        self.profile = profile
        self.conversation = Conversation()
        self.is_loading = False
        self.notifications: List[NotificationKind] = []
        self._client = client
        self._notify = notify
        self._on_change = on_change

    @property
    def welcome(self) -> str:
        return get_welcome_message(self.language, self.mode)

    @property
    def suggestions(self) -> List[str]:
        return get_suggested_questions(self.language, self.mode)

    def set_mode(self, mode: str):
        """Switch the interaction mode and start a fresh conversation."""
        self.mode = resolve_mode(mode)
        self.conversation.clear()
        self._changed()

    def set_language(self, language: str):
        self.language = resolve_language(language)

    def _changed(self):
        if self._on_change:
            self._on_change(self.conversation)

    def _emit(self, kind: NotificationKind, detail: Optional[str] = None):
        self.notifications.append(kind)
        message = NOTIFICATION_MESSAGES[kind]
        logger.warning(f"[ERROR] {message}" + (f" ({detail})" if detail else ""))
        if self._notify:
            self._notify(kind, message)

    def _request_body(self) -> Dict:
        return {
            "messages": self.conversation.history(),
            "language": self.language,
            "mode": self.mode,
            "userProfile": self.profile.model_dump(exclude_none=True) if self.profile else None,
        }

    def _show(self, content: str):
        self.conversation.apply_assistant_content(content)
        self._changed()

    async def send(self, text: str) -> bool:
        """
        Send a user message and stream the assistant reply into the conversation.

        Returns:
            True when the reply streamed to completion, False otherwise
        """
        if not text or not text.strip() or self.is_loading:
            return False

        self.conversation.add_user_message(text)
        self._changed()
        self.is_loading = True

        owns_client = self._client is None
        client = self._client or get_http_client()
        try:
            async with client.stream("POST", "/ai-chat", json=self._request_body()) as response:
                if not response.is_success:
                    raise RelayError(response.status_code, await _error_message(response))

                self.conversation.begin_assistant_turn()
                consumer = StreamConsumer(on_update=self._show)
                async for chunk in response.aiter_bytes():
                    consumer.feed(chunk)
                    if consumer.done:
                        break
                consumer.finish()
            return True
        except RelayError as e:
            self._emit(e.kind, e.message)
            return False
        except Exception as e:
            # partial assistant text stays visible
            self._emit(NotificationKind.REQUEST_FAILED, str(e))
            return False
        finally:
            self.conversation.end_assistant_turn()
            self.is_loading = False
            if owns_client:
                await client.aclose()


async def run_terminal_chat(session: ChatSession):
    """Minimal interactive loop: /mode <name>, /lang <code>, /quit."""
    printed = {"length": 0}

    def on_change(conversation: Conversation):
        if conversation.streaming and conversation.messages:
            content = conversation.messages[-1].content
            print(content[printed["length"]:], end="", flush=True)
            printed["length"] = len(content)

    session._on_change = on_change
    session._notify = lambda kind, message: print(f"\n[!] {message}")

    print(session.welcome)
    for question in session.suggestions:
        print(f"  * {question}")

    while True:
        text = (await asyncio.to_thread(input, "\n> ")).strip()
        if text == "/quit":
            break
        if text.startswith("/mode "):
            session.set_mode(text.split(maxsplit=1)[1])
            print(session.welcome)
            continue
        if text.startswith("/lang "):
            session.set_language(text.split(maxsplit=1)[1])
            print(session.welcome)
            continue
        printed["length"] = 0
        await session.send(text)
        print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    asyncio.run(run_terminal_chat(ChatSession()))
