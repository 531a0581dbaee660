"""Configuration and static language data for the translation client."""

import os
from dataclasses import dataclass
from typing import Optional


GOOGLE_KEY_ENV = "GOOGLE_TRANSLATE_API_KEY"
MICROSOFT_KEY_ENV = "MICROSOFT_TRANSLATOR_API_KEY"

API_KEY_ENV_VARS = {
    "google": GOOGLE_KEY_ENV,
    "microsoft": MICROSOFT_KEY_ENV,
}


# Language name to code mappings supported by Google Translate
GOOGLE_LANGS = {
    "Afrikaans": "af",
    "Albanian": "sq",
    "Arabic": "ar",
    "Armenian": "hy",
    "Azerbaijani": "az",
    "Basque": "eu",
    "Belarusian": "be",
    "Bengali": "bn",
    "Bosnian": "bs",
    "Bulgarian": "bg",
    "Catalan": "ca",
    "Cebuano": "ceb",
    "Chinese_Simplified": "zh-CN",
    "Chinese_Traditional": "zh-TW",
    "Croatian": "hr",
    "Czech": "cs",
    "Danish": "da",
    "Dutch": "nl",
    "English": "en",
    "Esperanto": "eo",
    "Estonian": "et",
    "Filipino": "tl",
    "Finnish": "fi",
    "French": "fr",
    "Galician": "gl",
    "Georgian": "ka",
    "German": "de",
    "Greek": "el",
    "Gujarati": "gu",
    "Haitian_Creole": "ht",
    "Hausa": "ha",
    "Hebrew": "iw",
    "Hindi": "hi",
    "Hmong": "hmn",
    "Hungarian": "hu",
    "Icelandic": "is",
    "Igbo": "ig",
    "Indonesian": "id",
    "Irish": "ga",
    "Italian": "it",
    "Japanese": "ja",
    "Javanese": "jw",
    "Kannada": "kn",
    "Khmer": "km",
    "Korean": "ko",
    "Lao": "lo",
    "Latin": "la",
    "Latvian": "lv",
    "Lithuanian": "lt",
    "Macedonian": "mk",
    "Malay": "ms",
    "Maltese": "mt",
    "Maori": "mi",
    "Marathi": "mr",
    "Mongolian": "mn",
    "Nepali": "ne",
    "Norwegian": "no",
    "Persian": "fa",
    "Polish": "pl",
    "Portuguese": "pt",
    "Punjabi": "pa",
    "Romanian": "ro",
    "Russian": "ru",
    "Serbian": "sr",
    "Slovak": "sk",
    "Slovenian": "sl",
    "Somali": "so",
    "Spanish": "es",
    "Swahili": "sw",
    "Swedish": "sv",
    "Tamil": "ta",
    "Telugu": "te",
    "Thai": "th",
    "Turkish": "tr",
    "Ukrainian": "uk",
    "Urdu": "ur",
    "Vietnamese": "vi",
    "Welsh": "cy",
    "Yiddish": "yi",
    "Yoruba": "yo",
    "Zulu": "zu",
}

# Language name to code mappings supported by Microsoft Translator
MICROSOFT_LANGS = {
    "Arabic": "ar",
    "Bulgarian": "bg",
    "Catalan": "ca",
    "Chinese_Simplified": "zh-CHS",
    "Chinese_Traditional": "zh-CHT",
    "Czech": "cs",
    "Danish": "da",
    "Dutch": "nl",
    "English": "en",
    "Estonian": "et",
    "Finnish": "fi",
    "French": "fr",
    "German": "de",
    "Greek": "el",
    "Haitian_Creole": "ht",
    "Hebrew": "he",
    "Hindi": "hi",
    "Hmong_Daw": "mww",
    "Hungarian": "hu",
    "Indonesian": "id",
    "Italian": "it",
    "Japanese": "ja",
    "Klingon": "tlh",
    "Klingon_pIqaD": "tlh-Qaak",
    "Korean": "ko",
    "Latvian": "lv",
    "Lithuanian": "lt",
    "Malay": "ms",
    "Maltese": "mt",
    "Norwegian": "no",
    "Persian": "fa",
    "Polish": "pl",
    "Portuguese": "pt",
    "Romanian": "ro",
    "Russian": "ru",
    "Slovak": "sk",
    "Slovenian": "sl",
    "Spanish": "es",
    "Swedish": "sv",
    "Thai": "th",
    "Turkish": "tr",
    "Ukrainian": "uk",
    "Urdu": "ur",
    "Vietnamese": "vi",
    "Welsh": "cy",
}

# Sample texts for examples and smoke tests
TRANSLATION_QUOTES = {
    "borges": "The original is unfaithful to the translation.",
    "jowett": (
        "All translation is a compromise - the effort to be literal "
        "and the effort to be idiomatic."
    ),
    "friar": (
        "Even the simplest word can never be rendered with its exact "
        "equivalent into another language."
    ),
}


@dataclass
class TranslationConfig:
    """Configuration for the translation client.

    Attributes:
        source_language: Default source language code (default: "en").
        google_url: Google Translate v2 endpoint.
        microsoft_url: Microsoft Translator V2 translate endpoint.
        token_url: Microsoft token issuing endpoint.
        token_lifetime: Seconds a Microsoft access token is valid for,
            as stated by the issuing service.
        token_margin: Seconds shaved off the stated lifetime so a token is
            never used right at its expiry.
        timeout: Per-request timeout in seconds.
        max_workers: Pool size for the parallel strategies. None lets
            concurrent.futures pick.
    """
    source_language: str = "en"
    google_url: str = "https://www.googleapis.com/language/translate/v2"
    microsoft_url: str = "https://api.microsofttranslator.com/V2/Http.svc/Translate"
    token_url: str = "https://api.cognitive.microsoft.com/sts/v1.0/issueToken"
    token_lifetime: int = 600
    token_margin: int = 10
    timeout: float = 30.0
    max_workers: Optional[int] = None

    @property
    def token_validity(self) -> int:
        """Seconds an access token is treated as usable after issue."""
        return self.token_lifetime - self.token_margin


def get_api_key(engine: str) -> str:
    """Read the API key for an engine from its environment variable.

    Args:
        engine: Engine name ("google" or "microsoft").

    Returns:
        The key, or an empty string if the variable is unset.
    """
    return os.environ.get(API_KEY_ENV_VARS[engine], "")
