"""Single-text translation against Google Translate and Microsoft Translator."""

import logging
import xml.etree.ElementTree as ElementTree
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Union

import requests

from ..auth import AccessToken, TokenHolder
from ..config import GOOGLE_LANGS, MICROSOFT_LANGS, TranslationConfig, get_api_key
from ..exceptions import TokenExpiredError, UnsupportedLanguageError

logger = logging.getLogger(__name__)

TextInput = Union[str, Sequence[str]]


def collapse_text(text: TextInput) -> str:
    """Join a sequence of lines into one newline-separated string.

    Args:
        text: A single string, or a list/tuple of strings forming one item.

    Returns:
        The text to send upstream.
    """
    if isinstance(text, (list, tuple)):
        return "\n".join(text)
    return text


class TranslationBackend(ABC):
    """Abstract base class for translation engines."""

    name: str = "base"
    languages: dict[str, str] = {}

    def __init__(self, config: Optional[TranslationConfig] = None):
        """Initialize the backend.

        Args:
            config: Client configuration. Uses defaults if not provided.
        """
        self.config = config or TranslationConfig()

    def validate_language(self, code: str) -> str:
        """Check that a language code is supported by this engine.

        Raises:
            UnsupportedLanguageError: If the code is not supported.
        """
        if code not in self.languages.values():
            raise UnsupportedLanguageError(code, self.name)
        return code

    @abstractmethod
    def translate(
        self,
        text: TextInput,
        lang_to: str,
        lang_from: str,
        credential: Any
    ) -> str:
        """Translate one text.

        Args:
            text: Text to translate. Sequences are joined with newlines.
            lang_to: Target language code.
            lang_from: Source language code.
            credential: Engine-specific credential.

        Returns:
            Translated text.
        """
        pass

    @abstractmethod
    def open_session(self, api_key: Optional[str] = None) -> Any:
        """Prepare whatever a batch of calls shares, before fan-out."""
        pass

    @abstractmethod
    def credential_for(self, session: Any) -> Any:
        """Get the credential one call should use from the batch session."""
        pass


class GoogleBackend(TranslationBackend):
    """Google Translate v2, authenticated with an API key."""

    name = "google"
    languages = GOOGLE_LANGS

    def translate(
        self,
        text: TextInput,
        lang_to: str,
        lang_from: str = "en",
        credential: Optional[str] = None
    ) -> str:
        """Translate text using Google Translate.

        The API key goes in the query string; the response is JSON with the
        result under data.translations[0].translatedText.
        """
        text = collapse_text(text)
        lang_to = self.validate_language(lang_to)
        lang_from = self.validate_language(lang_from)
        if credential is None:
            credential = get_api_key(self.name)

        logger.debug("Google translate %s -> %s (%d chars)", lang_from, lang_to, len(text))
        response = requests.get(
            self.config.google_url,
            params={
                "q": text,
                "source": lang_from,
                "target": lang_to,
                "format": "text",
                "key": credential,
            },
            timeout=self.config.timeout
        )
        response.raise_for_status()

        return response.json()["data"]["translations"][0]["translatedText"]

    def open_session(self, api_key: Optional[str] = None) -> str:
        if api_key is None:
            api_key = get_api_key(self.name)
        return api_key

    def credential_for(self, session: str) -> str:
        return session


class MicrosoftBackend(TranslationBackend):
    """Microsoft Translator V2, authenticated with a bearer access token."""

    name = "microsoft"
    languages = MICROSOFT_LANGS

    def translate(
        self,
        text: TextInput,
        lang_to: str,
        lang_from: str = "en",
        credential: Optional[AccessToken] = None
    ) -> str:
        """Translate text using Microsoft Translator.

        The token must still be valid; refreshing is the caller's job. The
        response body is a single XML string element.

        Raises:
            TokenExpiredError: If the access token has expired.
        """
        text = collapse_text(text)
        if credential is None or credential.is_expired():
            raise TokenExpiredError(credential.valid_until if credential else None)
        lang_to = self.validate_language(lang_to)
        lang_from = self.validate_language(lang_from)

        logger.debug("Microsoft translate %s -> %s (%d chars)", lang_from, lang_to, len(text))
        response = requests.get(
            self.config.microsoft_url,
            params={
                "text": text,
                "from": lang_from,
                "to": lang_to,
                "contentType": "text/plain",
            },
            headers={"Authorization": f"Bearer {credential.value}"},
            timeout=self.config.timeout
        )
        response.raise_for_status()

        root = ElementTree.fromstring(response.content)
        return "".join(root.itertext())

    def open_session(self, api_key: Optional[str] = None) -> TokenHolder:
        """Acquire the initial token for a batch."""
        return TokenHolder.acquire(api_key, self.config)

    def credential_for(self, session: TokenHolder) -> AccessToken:
        return session.current()
