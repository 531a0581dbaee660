"""Engine selection and the public translation functions."""

import logging
from typing import Optional, Sequence

from ..config import TranslationConfig
from ..exceptions import UnknownEngineError
from ..translation import BatchTranslator, GoogleBackend, MicrosoftBackend
from ..translation.batch import BatchResult, Strategy, as_items, resolve_strategy
from ..translation.engine import TextInput, TranslationBackend

logger = logging.getLogger(__name__)


# Engine name to backend class
BACKENDS: dict[str, type[TranslationBackend]] = {
    "google": GoogleBackend,
    "microsoft": MicrosoftBackend,
}


def resolve_engine(engine: str) -> type[TranslationBackend]:
    """Look up the backend class for an engine name.

    Raises:
        UnknownEngineError: If the engine is not in BACKENDS.
    """
    try:
        return BACKENDS[engine]
    except (KeyError, TypeError):
        raise UnknownEngineError(engine, list(BACKENDS)) from None


class TranslationService:
    """Dispatches batch translations to the chosen engine."""

    def __init__(self, config: Optional[TranslationConfig] = None):
        """Initialize the translation service.

        Args:
            config: Client configuration. Uses defaults if not provided.
        """
        self.config = config or TranslationConfig()

    def batch_translator(
        self,
        engine: str = "google",
        parallelization_strategy=Strategy.SEQUENTIAL,
        max_workers: Optional[int] = None
    ) -> BatchTranslator:
        """Build a BatchTranslator for an engine.

        Both names are checked here, before anything touches the network.
        """
        backend_cls = resolve_engine(engine)
        strategy = resolve_strategy(parallelization_strategy)
        return BatchTranslator(backend_cls(self.config), strategy, max_workers)

    def translate_items(
        self,
        x: Sequence[TextInput],
        lang_to: str,
        lang_from: Optional[str] = None,
        api_key: Optional[str] = None,
        parallelization_strategy=Strategy.SEQUENTIAL,
        engine: str = "google",
        max_workers: Optional[int] = None
    ) -> BatchResult:
        """Translate texts and keep per-item error details."""
        translator = self.batch_translator(engine, parallelization_strategy, max_workers)
        return translator.translate_items(x, lang_to, lang_from, api_key)

    def translate(
        self,
        x: Sequence[TextInput],
        lang_to: str,
        lang_from: Optional[str] = None,
        api_key: Optional[str] = None,
        parallelization_strategy=Strategy.SEQUENTIAL,
        engine: str = "google",
        max_workers: Optional[int] = None
    ) -> list[Optional[str]]:
        """Translate texts with the chosen engine.

        Args:
            x: Texts to translate.
            lang_to: Target language code.
            lang_from: Source language code. Uses config default if not provided.
            api_key: Key for the engine. Read from the engine's environment
                variable if not provided.
            parallelization_strategy: "sequential", "multicore" or "cluster".
            engine: "google" or "microsoft".
            max_workers: Pool size for the parallel strategies.

        Returns:
            Translations in input order, None where an item failed.
        """
        return self.translate_items(
            x, lang_to, lang_from, api_key,
            parallelization_strategy, engine, max_workers
        ).translations()


def get_google_translations(
    x: Sequence[TextInput],
    lang_to: str,
    lang_from: str = "en",
    google_key: Optional[str] = None,
    parallelization_strategy=Strategy.SEQUENTIAL
) -> list[Optional[str]]:
    """Get translations from Google Translate.

    Args:
        x: Texts to translate.
        lang_to: Target language code, one of GOOGLE_LANGS.
        lang_from: Source language code, one of GOOGLE_LANGS.
        google_key: API key. Read from GOOGLE_TRANSLATE_API_KEY if not provided.
        parallelization_strategy: "sequential", "multicore" or "cluster".

    Returns:
        Translations in input order, None where an item failed.
    """
    return TranslationService().translate(
        x, lang_to, lang_from, google_key, parallelization_strategy, "google"
    )


def get_microsoft_translations(
    x: Sequence[TextInput],
    lang_to: str,
    lang_from: str = "en",
    microsoft_key: Optional[str] = None,
    parallelization_strategy=Strategy.SEQUENTIAL
) -> list[Optional[str]]:
    """Get translations from Microsoft Translator.

    One access token is acquired up front; each item refreshes it if it has
    expired by the time that item runs.

    Args:
        x: Texts to translate.
        lang_to: Target language code, one of MICROSOFT_LANGS.
        lang_from: Source language code, one of MICROSOFT_LANGS.
        microsoft_key: Subscription key. Read from
            MICROSOFT_TRANSLATOR_API_KEY if not provided.
        parallelization_strategy: "sequential", "multicore" or "cluster".

    Returns:
        Translations in input order, None where an item failed.

    Raises:
        requests.HTTPError: If the initial access token cannot be obtained.
    """
    return TranslationService().translate(
        x, lang_to, lang_from, microsoft_key, parallelization_strategy, "microsoft"
    )


# Engine name to batch translation function
ENGINES = {
    "google": get_google_translations,
    "microsoft": get_microsoft_translations,
}


def get_translations(
    x: Sequence[TextInput],
    lang_to: str,
    lang_from: str = "en",
    api_key: Optional[str] = None,
    parallelization_strategy=Strategy.SEQUENTIAL,
    engine: str = "google"
) -> list[Optional[str]]:
    """Translate text, choosing Google Translate or Microsoft Translator.

    Args:
        x: Texts to translate.
        lang_to: Target language code for the chosen engine.
        lang_from: Source language code, defaulting to English.
        api_key: Key for the chosen engine.
        parallelization_strategy: "sequential", "multicore" or "cluster".
        engine: "google" or "microsoft".

    Returns:
        Translations in input order, None where an item failed.

    Raises:
        UnknownEngineError: If engine is not a known engine name.
        ValueError: If parallelization_strategy is not a known strategy.
    """
    resolve_engine(engine)
    strategy = resolve_strategy(parallelization_strategy)
    x = as_items(x)
    logger.debug("Dispatching %d texts to %s", len(x), engine)
    return ENGINES[engine](x, lang_to, lang_from, api_key, strategy)
