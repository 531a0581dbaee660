"""Engine selection and top-level translation functions."""

from .service import (
    BACKENDS,
    ENGINES,
    TranslationService,
    get_google_translations,
    get_microsoft_translations,
    get_translations,
)

__all__ = [
    "BACKENDS",
    "ENGINES",
    "TranslationService",
    "get_google_translations",
    "get_microsoft_translations",
    "get_translations",
]
