"""Tests for client configuration."""

import pytest

from duotranslate.config import TranslationConfig, get_api_key


class TestTranslationConfig:

    def test_defaults(self):
        config = TranslationConfig()

        assert config.source_language == "en"
        assert config.token_lifetime == 600
        assert config.token_validity == 590
        assert config.max_workers is None

    def test_custom_margin(self):
        config = TranslationConfig(token_lifetime=300, token_margin=60)
        assert config.token_validity == 240


class TestGetApiKey:

    def test_unset_is_empty(self):
        assert get_api_key("google") == ""
        assert get_api_key("microsoft") == ""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_TRANSLATE_API_KEY", "g")
        monkeypatch.setenv("MICROSOFT_TRANSLATOR_API_KEY", "m")

        assert get_api_key("google") == "g"
        assert get_api_key("microsoft") == "m"

    def test_unknown_engine(self):
        with pytest.raises(KeyError):
            get_api_key("yandex")
