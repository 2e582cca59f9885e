import enum

# Enums
class InteractionMode(str, enum.Enum):
    GENERAL = "general"
    TWIN = "twin"
    ALTERNATIVES = "alternatives"
    CAREER = "career"

class Language(str, enum.Enum):
    RU = "ru"
    KZ = "kz"
    EN = "en"

class Role(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

class NotificationKind(str, enum.Enum):
    RATE_LIMIT = "rate_limit"
    PAYMENT_REQUIRED = "payment_required"
    SERVICE_ERROR = "service_error"
    REQUEST_FAILED = "request_failed"
