"""
In-memory conversation store for one chat session.
"""

import time
from typing import Dict, List, Optional

from models import Role
from schemas import ChatMessage


class ConversationError(Exception):
    pass


class Conversation:
    """
    Ordered list of chat messages.

    Only one assistant message streams at a time. `apply_assistant_content`
    replaces the content of the last message when it is an assistant turn and
    appends a new assistant message otherwise.
    """

    def __init__(self):
        self.messages: List[ChatMessage] = []
        self.streaming = False
        self.streaming_id: Optional[str] = None
        self._last_id = 0

    def _next_id(self) -> str:
        # milliseconds since epoch, bumped so ids stay unique within the conversation
        self._last_id = max(int(time.time() * 1000), self._last_id + 1)
        return str(self._last_id)

    def add_user_message(self, content: str) -> ChatMessage:
        if self.streaming:
            raise ConversationError("Cannot add a user message while a reply is streaming")
        message = ChatMessage(id=self._next_id(), role=Role.USER.value, content=content)
        self.messages.append(message)
        return message

    def begin_assistant_turn(self):
        if self.streaming:
            raise ConversationError("An assistant reply is already streaming")
        self.streaming = True
        self.streaming_id = None

    def apply_assistant_content(self, content: str) -> ChatMessage:
        """Show the running assistant content, merging into the last assistant bubble."""
        if self.messages and self.messages[-1].role == Role.ASSISTANT.value:
            message = self.messages[-1]
            message.content = content
        else:
            message = ChatMessage(id=self._next_id(), role=Role.ASSISTANT.value, content=content)
            self.messages.append(message)
        if self.streaming:
            self.streaming_id = message.id
        return message

    def end_assistant_turn(self):
        self.streaming = False
        self.streaming_id = None

    def clear(self):
        self.messages = []
        self.end_assistant_turn()

    def history(self) -> List[Dict[str, str]]:
        """Turns in the shape the relay expects."""
        return [{"role": m.role, "content": m.content} for m in self.messages]
