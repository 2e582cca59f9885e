"""
Content moderation for user-generated text (reviews, comments, chat input).

Deterministic word-list and pattern checks, no external calls.
"""

import re
from typing import List

from schemas import ModerationResult

# Profanity word lists for Russian, Kazakh, and English
PROFANITY_RU = [
    'блять', 'бля', 'блядь', 'блядина', 'сука', 'сучка', 'хуй', 'хуйня', 'хуёвый', 'хуйло',
    'пизда', 'пиздец', 'пиздато', 'пиздёж', 'ебать', 'ебаный', 'ебанутый', 'ёб', 'ебал',
    'ебло', 'заебал', 'заебись', 'наебать', 'отъебись', 'поебать', 'уёбок', 'уёбище',
    'мудак', 'мудила', 'долбоёб', 'дебил', 'идиот', 'придурок', 'мразь', 'тварь',
    'гандон', 'пидор', 'пидорас', 'педик', 'чмо', 'лох', 'говно', 'срань', 'жопа',
    'залупа', 'хер', 'херня', 'член', 'елда', 'письки', 'сиськи', 'дрочить', 'дрочка',
    'шлюха', 'проститутка', 'шалава', 'потаскуха', 'курва',
]

PROFANITY_KZ = [
    'сасық', 'сатқын', 'масқара', 'ақымақ', 'есек', 'итбала', 'қотақбас',
    'мақау', 'жынды', 'надан', 'зиялы емес', 'арсыз', 'бетсіз', 'ұятсыз',
    'кемтар', 'мылжың', 'қорқақ', 'қу', 'қаңғыбас', 'маскүнем',
]

PROFANITY_EN = [
    'fuck', 'fucking', 'fucker', 'fucked', 'motherfucker', 'shit', 'shitty', 'bullshit',
    'ass', 'asshole', 'bastard', 'bitch', 'damn', 'dick', 'dickhead', 'cock', 'cunt',
    'pussy', 'whore', 'slut', 'retard', 'retarded', 'idiot', 'moron', 'dumbass',
    'nigger', 'nigga', 'faggot', 'fag', 'dyke', 'crap', 'piss', 'pissed',
    'wanker', 'twat', 'bollocks', 'arse', 'bloody', 'bugger', 'sodoff',
]

# Contact details and links
INAPPROPRIATE_PATTERNS = [
    re.compile(r'(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}'),  # phone numbers
    re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}'),  # e-mail addresses
    re.compile(r'(https?://[^\s]+)'),  # URLs
    re.compile(r'\b(telegram|whatsapp|viber|instagram|facebook|vk|tiktok)\s*[:/@]\s*\S+', re.IGNORECASE),
]

PROFANITY_REASON = 'Обнаружена нецензурная лексика / Нецензурлық сөздер табылды / Profanity detected'
CONTACT_REASON = (
    'Обнаружена контактная информация или ссылки / '
    'Байланыс ақпараты немесе сілтемелер табылды / '
    'Contact information or links detected'
)

_SUBSTITUTIONS = str.maketrans({'0': 'o', '1': 'i', '3': 'e', '4': 'a', '5': 's', '$': 's', '@': 'a'})
_STRIPPED = re.compile(r'[*_\-.,!?]')


def normalize_text(text: str) -> str:
    """Lowercase and undo common letter substitutions (0 -> o, $ -> s, ...)."""
    return _STRIPPED.sub('', text.lower().translate(_SUBSTITUTIONS))


def _detect_words(normalized: str) -> List[str]:
    detected = []
    for word in PROFANITY_RU + PROFANITY_KZ:
        if normalize_text(word) in normalized:
            detected.append(word)
    for word in PROFANITY_EN:
        # English words only match whole words, bounded by ASCII word characters
        if re.search(rf'\b{re.escape(normalize_text(word))}\b', normalized, re.IGNORECASE | re.ASCII):
            detected.append(word)
    # de-duplicate, keep detection order
    return list(dict.fromkeys(detected))


def check_profanity(text: str) -> ModerationResult:
    """
    Check text for profanity and contact details.

    Args:
        text: Raw user text

    Returns:
        ModerationResult, clean unless a word list or pattern matched
    """
    if not text or not text.strip():
        return ModerationResult(is_clean=True)

    detected = _detect_words(normalize_text(text))
    if detected:
        return ModerationResult(is_clean=False, reason=PROFANITY_REASON, detected_words=detected)

    for pattern in INAPPROPRIATE_PATTERNS:
        if pattern.search(text):
            return ModerationResult(is_clean=False, reason=CONTACT_REASON)

    return ModerationResult(is_clean=True)
