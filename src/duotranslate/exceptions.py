"""
Translation Client Exceptions

Kept in their own module so the auth, engine and service layers can share
them without importing each other.
"""


class TranslationError(Exception):
    """Translation client error with optional code and details."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class UnsupportedLanguageError(TranslationError, ValueError):
    """A language code is not in the engine's supported set."""

    def __init__(self, code: str, engine: str):
        super().__init__(
            f"'{code}' is not a language supported by {engine}",
            code="unsupported_language",
            details={"language": code, "engine": engine},
        )


class TokenExpiredError(TranslationError):
    """An access token was used after its expiry time."""

    def __init__(self, valid_until):
        super().__init__(
            "Your access token has expired.",
            code="token_expired",
            details={"valid_until": valid_until},
        )


class UnknownEngineError(TranslationError, ValueError):
    """The requested translation engine does not exist."""

    def __init__(self, engine: str, available):
        super().__init__(
            f"Unknown translation engine '{engine}'. "
            f"Choose one of: {', '.join(available)}",
            code="unknown_engine",
            details={"engine": engine},
        )
