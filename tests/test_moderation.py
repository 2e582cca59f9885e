"""
Unit tests for content moderation.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app
from moderation import CONTACT_REASON, PROFANITY_REASON, check_profanity, normalize_text


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestNormalizeText:
    """Test substitution undoing."""

    def test_substitutions(self):
        assert normalize_text("$H1T") == "shit"
        assert normalize_text("m0r0n!") == "moron"
        assert normalize_text("b-a.d_w*o,r?d") == "badword"


class TestCheckProfanity:
    """Test word lists and patterns."""

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_text_is_clean(self, text):
        assert check_profanity(text).is_clean

    def test_clean_review(self):
        result = check_profanity("Great university, friendly teachers and a modern campus.")
        assert result.is_clean
        assert result.reason is None

    def test_english_word_on_boundaries_only(self):
        assert check_profanity("The class was a good pass.").is_clean
        result = check_profanity("What an a$$hole")
        assert not result.is_clean
        assert result.detected_words == ["asshole"]

    def test_english_word_next_to_cyrillic(self):
        # Cyrillic letters are not word characters for the English boundary check
        result = check_profanity("moronчик")
        assert not result.is_clean
        assert result.detected_words == ["moron"]

    def test_russian_substring(self):
        result = check_profanity("Преподаватели - полные идиоты")
        assert not result.is_clean
        assert result.reason == PROFANITY_REASON
        assert "идиот" in result.detected_words

    def test_detected_words_are_unique(self):
        result = check_profanity("idiot idiot IDIOT")
        assert result.detected_words == ["idiot"]

    @pytest.mark.parametrize(
        "text",
        [
            "Call me at +7 701 555 1234",
            "Write to student@example.com",
            "See https://example.com/offer",
            "telegram: @seller",
        ],
    )
    def test_contact_details(self, text):
        result = check_profanity(text)
        assert not result.is_clean
        assert result.reason == CONTACT_REASON
        assert result.detected_words is None


class TestModerationEndpoint:
    """Test POST /moderate-content."""

    def test_flagged_text(self, client):
        response = client.post("/moderate-content", json={"text": "such bullshit", "type": "review"})

        assert response.status_code == 200
        body = response.json()
        assert body["isClean"] is False
        assert body["reason"] == PROFANITY_REASON
        assert "bullshit" in body["detectedWords"]
        assert response.headers["access-control-allow-origin"] == "*"

    def test_clean_text_has_only_flag(self, client):
        response = client.post("/moderate-content", json={"text": "Nice dorms"})
        assert response.json() == {"isClean": True}

    @pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": 123}, {"text": None}])
    def test_missing_or_non_string_text_is_clean(self, client, body):
        response = client.post("/moderate-content", json=body)
        assert response.status_code == 200
        assert response.json() == {"isClean": True}

    def test_failure_fails_open(self, client):
        with patch("main.check_profanity", side_effect=RuntimeError("boom")):
            response = client.post("/moderate-content", json={"text": "hello"})

        assert response.status_code == 500
        assert response.json() == {"error": "boom", "isClean": True}

    def test_malformed_body_fails_open(self, client):
        response = client.post(
            "/moderate-content", content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["isClean"] is True
        assert body["error"]
        assert response.headers["access-control-allow-origin"] == "*"

    def test_non_object_body_is_clean(self, client):
        response = client.post(
            "/moderate-content", content=b"[]", headers={"content-type": "application/json"}
        )

        assert response.status_code == 200
        assert response.json() == {"isClean": True}

    def test_options(self, client):
        response = client.options("/moderate-content")
        assert response.status_code == 200
        assert response.content == b""
