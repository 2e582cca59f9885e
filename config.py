import os
import logging

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

class Settings:
    """Application settings loaded from environment variables."""

    # AI gateway
    AI_GATEWAY_API_KEY: str = os.getenv("AI_GATEWAY_API_KEY", "")
    AI_GATEWAY_URL: str = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
    AI_MODEL: str = os.getenv("AI_MODEL", "google/gemini-2.5-flash")
    AI_TIMEOUT_SECONDS: float = float(os.getenv("AI_TIMEOUT_SECONDS", "55"))

    # Locale
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "ru")

    # Server
    PORT: int = int(os.getenv("PORT", "8000"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Chat client
    RELAY_URL: str = os.getenv("RELAY_URL", "http://localhost:8000")

    # CORS
    ALLOWED_ORIGINS: list = ["*"]
    CORS_HEADERS: dict = {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    }

    @classmethod
    def validate(cls):
        """Validate required environment variables."""
        if not cls.AI_GATEWAY_API_KEY:
            logger.warning("AI_GATEWAY_API_KEY not set. /ai-chat will answer 500 until it is configured.")

settings = Settings()
