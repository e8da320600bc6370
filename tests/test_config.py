"""Tests for settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from maasapi.config import MAASSettings
from maasapi.version import Version


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MAASAPI_API_VERSION", "MAASAPI_LOG_LEVEL", "MAASAPI_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = MAASSettings()
    assert settings.api_version == "2.0"
    assert settings.version == Version(2, 0, 0)
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MAASAPI_API_VERSION", "2.1.9")
    monkeypatch.setenv("MAASAPI_LOG_LEVEL", "debug")
    monkeypatch.setenv("MAASAPI_LOG_FORMAT", "json")
    settings = MAASSettings()
    assert settings.version == Version(2, 1, 9)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"


def test_rejects_malformed_version():
    with pytest.raises(ValidationError):
        MAASSettings(api_version="two")


def test_rejects_unknown_format_and_level():
    with pytest.raises(ValidationError):
        MAASSettings(log_format="xml")
    with pytest.raises(ValidationError):
        MAASSettings(log_level="chatty")
