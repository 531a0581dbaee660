"""Microsoft Translator access tokens."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import requests

from ..config import TranslationConfig, get_api_key

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AccessToken:
    """A short-lived bearer token for Microsoft Translator.

    Attributes:
        value: The opaque token string.
        valid_until: Time after which the token must not be used. Set a
            little before the issuing service's stated expiry.
    """
    value: str
    valid_until: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the token is past its usable window."""
        return (now or _now()) > self.valid_until


def get_microsoft_access_token(
    microsoft_key: Optional[str] = None,
    config: Optional[TranslationConfig] = None
) -> AccessToken:
    """Get an access token to use Microsoft Translator.

    Args:
        microsoft_key: Subscription key for the Translator API. Read from
            MICROSOFT_TRANSLATOR_API_KEY if not provided.
        config: Client configuration. Uses defaults if not provided.

    Returns:
        AccessToken valid for config.token_validity seconds.

    Raises:
        requests.HTTPError: If the token service rejects the key.
    """
    config = config or TranslationConfig()
    if microsoft_key is None:
        microsoft_key = get_api_key("microsoft")

    response = requests.post(
        config.token_url,
        headers={"Ocp-Apim-Subscription-Key": microsoft_key},
        timeout=config.timeout
    )
    response.raise_for_status()

    token = AccessToken(
        value=response.text,
        valid_until=_now() + timedelta(seconds=config.token_validity)
    )
    logger.info("Acquired Microsoft access token, valid until %s", token.valid_until)
    return token


def refresh_access_token(
    token: AccessToken,
    microsoft_key: Optional[str] = None,
    config: Optional[TranslationConfig] = None
) -> AccessToken:
    """Return the token unchanged, or a fresh one if it has expired."""
    if token.is_expired():
        logger.debug("Access token expired at %s, refreshing", token.valid_until)
        return get_microsoft_access_token(microsoft_key, config)
    return token


class TokenHolder:
    """Shared slot for the current access token of one batch.

    Every task reads the token through current(), which refreshes it when
    expired and stores the replacement for tasks that run later. There is
    no locking, so tasks that see the expiry at the same moment each fetch
    their own token.
    """

    def __init__(
        self,
        token: AccessToken,
        microsoft_key: Optional[str] = None,
        config: Optional[TranslationConfig] = None
    ):
        """Initialize the holder.

        Args:
            token: Initial access token.
            microsoft_key: Subscription key used for refreshes.
            config: Client configuration.
        """
        self.token = token
        self.microsoft_key = microsoft_key
        self.config = config or TranslationConfig()

    def current(self) -> AccessToken:
        """Get a usable token, refreshing it first if it has expired."""
        self.token = refresh_access_token(self.token, self.microsoft_key, self.config)
        return self.token

    @classmethod
    def acquire(
        cls,
        microsoft_key: Optional[str] = None,
        config: Optional[TranslationConfig] = None
    ) -> "TokenHolder":
        """Create a holder seeded with a newly issued token."""
        config = config or TranslationConfig()
        if microsoft_key is None:
            microsoft_key = get_api_key("microsoft")
        return cls(get_microsoft_access_token(microsoft_key, config), microsoft_key, config)
