# AI Consultant Context Builder
# ==============================
# Builds the request sent to the AI gateway, including system prompt and caller profile

from typing import Dict, List, Optional

from config import settings
from models import Role
from prompts import PROFILE_LABELS, get_system_prompt, resolve_language
from schemas import CallerProfile, ChatRequest

# Order of lines in the personalisation fragment
PROFILE_FIELDS = [
    "ent_score",
    "expected_ent_score",
    "english_level",
    "target_degree",
    "budget_max_kzt",
    "interests",
    "preferred_cities",
    "willing_to_relocate",
]


def _format_value(value, labels: Dict[str, str]) -> str:
    if isinstance(value, bool):
        return labels["yes"] if value else labels["no"]
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def build_profile_context(profile: Optional[CallerProfile], language: Optional[str] = None) -> str:
    """
    Build the personalisation fragment appended to the system prompt.

    Args:
        profile: Caller-supplied applicant profile (optional)
        language: Requested locale, unsupported values fall back to the default

    Returns:
        One "label: value" line per populated field under a heading,
        or an empty string when nothing is populated
    """
    if profile is None:
        return ""

    labels = PROFILE_LABELS[resolve_language(language)]
    lines = []
    for field in PROFILE_FIELDS:
        value = getattr(profile, field)
        # False is a real answer for relocation, empty lists and blank strings are not
        if value is None or value == [] or value == "":
            continue
        lines.append(f"- {labels[field]}: {_format_value(value, labels)}")

    if not lines:
        return ""
    return "\n".join([labels["heading"], *lines])


def build_system_prompt(language: Optional[str], mode: Optional[str], profile: Optional[CallerProfile] = None) -> str:
    """Select the prompt template by locale and mode, then append the profile fragment."""
    prompt = get_system_prompt(language, mode)
    fragment = build_profile_context(profile, language)
    if fragment:
        prompt = f"{prompt}\n\n{fragment}"
    return prompt


def build_gateway_payload(request: ChatRequest) -> Dict:
    """
    Build the chat-completion payload for the AI gateway.

    The system prompt is prepended to the caller's turns; streaming is always on.
    """
    messages: List[Dict[str, str]] = [
        {"role": Role.SYSTEM.value, "content": build_system_prompt(request.language, request.mode, request.user_profile)}
    ]
    messages.extend({"role": turn.role, "content": turn.content} for turn in request.messages)

    return {
        "model": settings.AI_MODEL,
        "messages": messages,
        "stream": True,
    }
