"""
Pydantic schemas for API requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Literal, Optional

from config import settings
from models import InteractionMode

# Chat Schemas
class ChatTurn(BaseModel):
    role: str
    content: str

class ChatMessage(BaseModel):
    """A message shown in the chat window."""
    id: str  # assigned by Conversation
    role: Literal["user", "assistant"]
    content: str = ""

class CallerProfile(BaseModel):
    """Applicant attributes forwarded by the client for prompt personalisation."""
    model_config = ConfigDict(extra="ignore")

    ent_score: Optional[float] = None
    expected_ent_score: Optional[float] = None
    english_level: Optional[str] = None
    target_degree: Optional[str] = None
    budget_max_kzt: Optional[int] = None
    interests: Optional[List[str]] = None
    preferred_cities: Optional[List[str]] = None
    willing_to_relocate: Optional[bool] = None

class ChatRequest(BaseModel):
    # language and mode stay plain optional strings: null or unknown values fall back instead of failing validation
    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatTurn]
    language: Optional[str] = Field(default_factory=lambda: settings.DEFAULT_LANGUAGE)
    mode: Optional[str] = InteractionMode.GENERAL.value
    user_profile: Optional[CallerProfile] = Field(default=None, alias="userProfile")

# Stream chunk schema (all levels optional)
class ChunkDelta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[str] = None

class ChunkChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    delta: Optional[ChunkDelta] = None

class StreamChunk(BaseModel):
    model_config = ConfigDict(extra="ignore")

    choices: List[ChunkChoice] = []

    def delta_text(self) -> Optional[str]:
        """Return the incremental text of the first choice, or None if the chunk carries none."""
        if not self.choices:
            return None
        delta = self.choices[0].delta
        if delta is None or not delta.content:
            return None
        return delta.content

# Moderation Schemas
class ModerationRequest(BaseModel):
    text: Any = None
    type: Optional[str] = None

class ModerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_clean: bool = Field(alias="isClean")
    reason: Optional[str] = None
    detected_words: Optional[List[str]] = Field(default=None, alias="detectedWords")

# Error Schema
class ErrorResponse(BaseModel):
    error: str
