"""AppSettings: defaults, environment overrides, validation."""

import pytest
from pydantic import ValidationError

from passport_office.config.settings import AppSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("APP_NAME", "ENVIRONMENT", "DEBUG", "VERSION", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = AppSettings(_env_file=None)
    assert s.app_name == "passport-office"
    assert s.environment == "dev"
    assert s.debug is False
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("environment", "test")
    s = AppSettings(_env_file=None)
    assert s.log_level == "DEBUG"
    assert s.environment == "test"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_get_settings_cached():
    assert get_settings() is get_settings()
