"""Tests for the single-text translation backends."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
import requests

from duotranslate.auth import AccessToken, TokenHolder
from duotranslate.config import TranslationConfig
from duotranslate.exceptions import TokenExpiredError, UnsupportedLanguageError
from duotranslate.translation import GoogleBackend, MicrosoftBackend
from duotranslate.translation.engine import collapse_text


def _token(seconds_left: float = 300) -> AccessToken:
    return AccessToken(
        value="tok",
        valid_until=datetime.now(timezone.utc) + timedelta(seconds=seconds_left)
    )


class TestCollapseText:

    def test_string_unchanged(self):
        assert collapse_text("Hello") == "Hello"

    def test_lines_joined(self):
        assert collapse_text(["Hello", "World"]) == "Hello\nWorld"
        assert collapse_text(("a",)) == "a"


class TestGoogleBackend:
    """Tests for GoogleBackend.translate."""

    def test_translate(self, google_response):
        backend = GoogleBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = google_response("Hola")
            result = backend.translate("Hello", "es", "en", "g-key")

        assert result == "Hola"
        args, kwargs = mock_get.call_args
        assert args[0] == "https://www.googleapis.com/language/translate/v2"
        assert kwargs["params"] == {
            "q": "Hello",
            "source": "en",
            "target": "es",
            "format": "text",
            "key": "g-key",
        }

    def test_multiline_input(self, google_response):
        backend = GoogleBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = google_response("Hola\nMundo")
            result = backend.translate(["Hello", "World"], "es", "en", "g-key")

        assert mock_get.call_args.kwargs["params"]["q"] == "Hello\nWorld"
        assert result == "Hola\nMundo"

    def test_key_from_environment(self, google_response, monkeypatch):
        monkeypatch.setenv("GOOGLE_TRANSLATE_API_KEY", "env-key")
        backend = GoogleBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = google_response("Hola")
            backend.translate("Hello", "es")

        assert mock_get.call_args.kwargs["params"]["key"] == "env-key"

    def test_configured_timeout(self, google_response):
        backend = GoogleBackend(TranslationConfig(timeout=5))

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = google_response("Hola")
            backend.translate("Hello", "es", "en", "g-key")

        assert mock_get.call_args.kwargs["timeout"] == 5

    @pytest.mark.parametrize("lang_to,lang_from", [("xx", "en"), ("es", "xx"), ("zh-CHS", "en")])
    def test_unsupported_language(self, lang_to, lang_from):
        """Test unsupported codes fail before any request is made."""
        backend = GoogleBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            with pytest.raises(UnsupportedLanguageError) as exc_info:
                backend.translate("Hello", lang_to, lang_from, "g-key")

        mock_get.assert_not_called()
        assert exc_info.value.details["engine"] == "google"

    def test_http_error_propagates(self, make_response):
        backend = GoogleBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=403)
            with pytest.raises(requests.HTTPError):
                backend.translate("Hello", "es", "en", "g-key")

    def test_session_is_api_key(self, monkeypatch):
        backend = GoogleBackend()
        assert backend.credential_for(backend.open_session("k")) == "k"

        monkeypatch.setenv("GOOGLE_TRANSLATE_API_KEY", "env-key")
        assert backend.open_session() == "env-key"


class TestMicrosoftBackend:
    """Tests for MicrosoftBackend.translate."""

    def test_translate(self, microsoft_response):
        backend = MicrosoftBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = microsoft_response("Hola")
            result = backend.translate("Hello", "es", "en", _token())

        assert result == "Hola"
        args, kwargs = mock_get.call_args
        assert args[0] == "https://api.microsofttranslator.com/V2/Http.svc/Translate"
        assert kwargs["params"] == {
            "text": "Hello",
            "from": "en",
            "to": "es",
            "contentType": "text/plain",
        }
        assert kwargs["headers"] == {"Authorization": "Bearer tok"}

    def test_xml_entities_decoded(self, microsoft_response):
        backend = MicrosoftBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = microsoft_response("Tom &amp; Jerry")
            result = backend.translate("Tom & Jerry", "fr", "en", _token())

        assert result == "Tom & Jerry"

    def test_microsoft_codes(self, microsoft_response):
        backend = MicrosoftBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = microsoft_response("你好")
            backend.translate("Hello", "zh-CHS", "en", _token())

        assert mock_get.call_args.kwargs["params"]["to"] == "zh-CHS"

    def test_expired_token(self):
        """Test an expired token is rejected without a request."""
        backend = MicrosoftBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            with pytest.raises(TokenExpiredError):
                backend.translate("Hello", "es", "en", _token(-1))

        mock_get.assert_not_called()

    def test_unsupported_language(self):
        backend = MicrosoftBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            # Google's code for Chinese is not a Microsoft code
            with pytest.raises(UnsupportedLanguageError):
                backend.translate("Hello", "zh-CN", "en", _token())

        mock_get.assert_not_called()

    def test_http_error_propagates(self, make_response):
        backend = MicrosoftBackend()

        with patch("duotranslate.translation.engine.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=500)
            with pytest.raises(requests.HTTPError):
                backend.translate("Hello", "es", "en", _token())

    def test_open_session_acquires_token(self, make_response):
        backend = MicrosoftBackend()

        with patch("duotranslate.auth.token.requests.post") as mock_post:
            mock_post.return_value = make_response(text="issued")
            session = backend.open_session("m-key")

        assert isinstance(session, TokenHolder)
        assert backend.credential_for(session).value == "issued"
        assert mock_post.call_count == 1
