"""Access token handling for Microsoft Translator."""

from .token import (
    AccessToken,
    TokenHolder,
    get_microsoft_access_token,
    refresh_access_token,
)

__all__ = [
    "AccessToken",
    "TokenHolder",
    "get_microsoft_access_token",
    "refresh_access_token",
]
