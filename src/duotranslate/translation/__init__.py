"""Translation engines and batch processing."""

from .engine import TranslationBackend, GoogleBackend, MicrosoftBackend
from .batch import BatchTranslator, BatchResult, ItemResult, MISSING, Strategy

__all__ = [
    "TranslationBackend",
    "GoogleBackend",
    "MicrosoftBackend",
    "BatchTranslator",
    "BatchResult",
    "ItemResult",
    "MISSING",
    "Strategy",
]
