import pytest

from openai_binding.client import AsyncClient, Client
from openai_binding.errors import ConfigurationError
from openai_binding.settings import DEFAULT_BASE_URL, Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_TIMEOUT_SECONDS", "OPENAI_ORGANIZATION"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.openai_base_url == DEFAULT_BASE_URL
    assert settings.openai_api_key is None
    assert settings.openai_timeout_seconds == 30.0


def test_client_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1/")
    monkeypatch.setenv("OPENAI_ORGANIZATION", "org-env")
    client = Client.from_settings(Settings(_env_file=None))
    try:
        assert client.base_url == "http://localhost:8080/v1"
        assert client.headers["Authorization"] == "Bearer sk-env"
        assert client.headers["OpenAI-Organization"] == "org-env"
    finally:
        client.close()


def test_from_settings_without_key_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        Client.from_settings(Settings(_env_file=None))
    with pytest.raises(ConfigurationError):
        AsyncClient.from_settings(Settings(_env_file=None))
