"""Translate text with Google Translate or Microsoft Translator."""

from .auth import AccessToken, get_microsoft_access_token, refresh_access_token
from .config import (
    GOOGLE_LANGS,
    MICROSOFT_LANGS,
    TRANSLATION_QUOTES,
    TranslationConfig,
)
from .core import (
    ENGINES,
    TranslationService,
    get_google_translations,
    get_microsoft_translations,
    get_translations,
)
from .exceptions import (
    TokenExpiredError,
    TranslationError,
    UnknownEngineError,
    UnsupportedLanguageError,
)
from .translation import MISSING, Strategy

__version__ = "0.1.0"

__all__ = [
    "AccessToken",
    "ENGINES",
    "GOOGLE_LANGS",
    "MICROSOFT_LANGS",
    "MISSING",
    "Strategy",
    "TRANSLATION_QUOTES",
    "TokenExpiredError",
    "TranslationConfig",
    "TranslationError",
    "TranslationService",
    "UnknownEngineError",
    "UnsupportedLanguageError",
    "get_google_translations",
    "get_microsoft_access_token",
    "get_microsoft_translations",
    "get_translations",
    "refresh_access_token",
]
