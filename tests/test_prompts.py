"""
Unit tests for system prompt selection and gateway payload construction.
"""

import pytest

from ai_context import build_gateway_payload, build_profile_context, build_system_prompt
from config import settings
from models import InteractionMode, Language
from prompts import (
    SYSTEM_PROMPTS,
    get_suggested_questions,
    get_system_prompt,
    get_welcome_message,
)
from schemas import CallerProfile, ChatRequest


class TestPromptSelection:
    """Test locale and mode fallbacks."""

    @pytest.mark.parametrize("language", [l.value for l in Language])
    def test_every_locale_has_every_mode(self, language):
        assert set(SYSTEM_PROMPTS[language]) == {m.value for m in InteractionMode}

    @pytest.mark.parametrize("language", ["ru", "kz", "en"])
    @pytest.mark.parametrize("mode", ["unknown", "", None, "GENERAL"])
    def test_unsupported_mode_falls_back_to_general(self, language, mode):
        assert get_system_prompt(language, mode) == get_system_prompt(language, "general")

    @pytest.mark.parametrize("mode", [m.value for m in InteractionMode])
    @pytest.mark.parametrize("language", ["de", "", None, "RU"])
    def test_unsupported_locale_falls_back_to_default(self, language, mode):
        assert get_system_prompt(language, mode) == get_system_prompt(settings.DEFAULT_LANGUAGE, mode)

    def test_modes_use_distinct_prompts(self):
        prompts = {get_system_prompt("en", m.value) for m in InteractionMode}
        assert len(prompts) == len(InteractionMode)

    def test_welcome_and_suggestions_follow_the_same_fallbacks(self):
        assert get_welcome_message("xx", "nope") == get_welcome_message("ru", "general")
        assert get_suggested_questions("en", "career") != get_suggested_questions("en", "general")
        assert len(get_suggested_questions("kz", "twin")) == 3


class TestProfileContext:
    """Test the personalisation fragment."""

    def test_no_profile(self):
        assert build_profile_context(None, "en") == ""

    def test_empty_profile_is_omitted(self):
        profile = CallerProfile(interests=[], preferred_cities=[], english_level="")
        assert build_profile_context(profile, "en") == ""
        assert build_system_prompt("en", "general", profile) == get_system_prompt("en", "general")

    def test_all_fields(self):
        profile = CallerProfile(
            ent_score=110,
            expected_ent_score=120.5,
            english_level="B2",
            target_degree="bachelor",
            budget_max_kzt=1500000,
            interests=["IT", "Math"],
            preferred_cities=["Almaty", "Astana"],
            willing_to_relocate=True,
        )
        assert build_profile_context(profile, "en").splitlines() == [
            "Applicant profile:",
            "- UNT score: 110",
            "- Expected UNT score: 120.5",
            "- English level: B2",
            "- Target degree: bachelor",
            "- Budget (KZT per year): 1500000",
            "- Interests: IT, Math",
            "- Preferred cities: Almaty, Astana",
            "- Willing to relocate: yes",
        ]

    def test_relocation_false_is_populated(self):
        fragment = build_profile_context(CallerProfile(willing_to_relocate=False), "ru")
        assert fragment == "Профиль абитуриента:\n- Готов к переезду: нет"

    def test_unknown_profile_keys_are_ignored(self):
        profile = CallerProfile.model_validate({"ent_score": 90, "full_name": "Aru"})
        assert "Aru" not in build_profile_context(profile, "en")

    def test_fragment_appended_after_template(self):
        prompt = build_system_prompt("kz", "career", CallerProfile(english_level="C1"))
        assert prompt.startswith(get_system_prompt("kz", "career") + "\n\n")
        assert prompt.endswith("Ағылшын тілі деңгейі: C1")


class TestGatewayPayload:
    """Test the chat-completion request body."""

    def test_career_request_in_russian(self):
        request = ChatRequest.model_validate(
            {"messages": [{"role": "user", "content": "Hi"}], "mode": "career", "language": "ru"}
        )
        payload = build_gateway_payload(request)

        assert payload["stream"] is True
        assert payload["model"] == settings.AI_MODEL
        assert payload["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPTS["ru"]["career"]},
            {"role": "user", "content": "Hi"},
        ]

    def test_defaults(self):
        request = ChatRequest.model_validate({"messages": []})
        assert request.language == settings.DEFAULT_LANGUAGE
        assert request.mode == "general"
        assert request.user_profile is None

    def test_null_language_and_mode_use_default_prompt(self):
        request = ChatRequest.model_validate({"messages": [], "language": None, "mode": None, "userProfile": None})
        system = build_gateway_payload(request)["messages"][0]["content"]
        assert system == SYSTEM_PROMPTS[settings.DEFAULT_LANGUAGE]["general"]

    def test_profile_from_camel_case_key(self):
        request = ChatRequest.model_validate(
            {
                "messages": [{"role": "user", "content": "?"}],
                "language": "en",
                "userProfile": {"ent_score": 101, "preferred_cities": ["Shymkent"]},
            }
        )
        system = build_gateway_payload(request)["messages"][0]["content"]
        assert "- UNT score: 101" in system
        assert "- Preferred cities: Shymkent" in system

    def test_history_order_is_kept(self):
        turns = [
            {"role": "user", "content": "1"},
            {"role": "assistant", "content": "2"},
            {"role": "user", "content": "3"},
        ]
        payload = build_gateway_payload(ChatRequest.model_validate({"messages": turns}))
        assert payload["messages"][1:] == turns
