"""Shared fixtures for the translation client tests."""

from unittest.mock import Mock

import pytest
import requests


MICROSOFT_XML = (
    '<string xmlns="http://schemas.microsoft.com/2003/10/Serialization/">{}</string>'
)


def _make_response(status_code=200, json_data=None, text="", content=None):
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.content = content if content is not None else text.encode("utf-8")
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error"
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""
    return _make_response


@pytest.fixture
def google_response():
    """Factory for a successful Google Translate response."""
    def _google(translated):
        return _make_response(
            json_data={"data": {"translations": [{"translatedText": translated}]}}
        )
    return _google


@pytest.fixture
def microsoft_response():
    """Factory for a successful Microsoft Translator response."""
    def _microsoft(translated):
        return _make_response(text=MICROSOFT_XML.format(translated))
    return _microsoft


@pytest.fixture(autouse=True)
def clear_api_keys(monkeypatch):
    """Keep real keys from the environment out of the tests."""
    monkeypatch.delenv("GOOGLE_TRANSLATE_API_KEY", raising=False)
    monkeypatch.delenv("MICROSOFT_TRANSLATOR_API_KEY", raising=False)
