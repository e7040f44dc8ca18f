from __future__ import annotations

from pathlib import Path

import pytest

from core.settings import Settings


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("GCS_MOCK_HOST", "GCS_MOCK_PORT", "GCS_MOCK_MANIFEST", "LOG_LEVEL", "LOG_FILE", "JSON_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = Settings.from_env()

    assert settings.host == "0.0.0.0"
    assert settings.port == 4443
    assert settings.manifest is None
    assert settings.log_level == "INFO"
    assert settings.json_logging is False


def test_environment_overrides(clean_env) -> None:
    clean_env.setenv("GCS_MOCK_HOST", "127.0.0.1")
    clean_env.setenv("GCS_MOCK_PORT", "9023")
    clean_env.setenv("GCS_MOCK_MANIFEST", "config/manifest.example.yaml")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("JSON_LOGGING", "yes")

    settings = Settings.from_env()

    assert settings.host == "127.0.0.1"
    assert settings.port == 9023
    assert settings.manifest == Path("config/manifest.example.yaml")
    assert settings.log_level == "DEBUG"
    assert settings.json_logging is True


def test_invalid_port(clean_env) -> None:
    clean_env.setenv("GCS_MOCK_PORT", "70000")

    with pytest.raises(ValueError):
        Settings.from_env()


def test_invalid_port_is_wrapped_as_configuration_error(clean_env) -> None:
    clean_env.setenv("GCS_MOCK_PORT", "not-a-port")

    with pytest.raises(ValueError, match="Invalid configuration"):
        Settings.from_env()
