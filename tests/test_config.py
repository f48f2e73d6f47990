"""Tests for environment-based Settings."""

import pytest
from pydantic import ValidationError

from process_restarter.config import DEFAULT_FALLBACK_DIRS, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("RESTARTER_USE_SUDO", "RESTARTER_GRACE_PERIOD_MS", "RESTARTER_FALLBACK_DIRS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.use_sudo is False
    assert settings.elevation_command == "sudo"
    assert settings.grace_period_ms == 5
    assert settings.grace_period_s == 0.005
    assert settings.vendor_prefix == "com.apple"
    assert settings.fallback_dirs == DEFAULT_FALLBACK_DIRS


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RESTARTER_USE_SUDO", "true")
    monkeypatch.setenv("RESTARTER_GRACE_PERIOD_MS", "50")
    monkeypatch.setenv("RESTARTER_FALLBACK_DIRS", '["/opt/bin"]')

    settings = Settings()

    assert settings.use_sudo is True
    assert settings.grace_period_ms == 50
    assert settings.fallback_dirs == ["/opt/bin"]


def test_negative_grace_period_rejected():
    with pytest.raises(ValidationError):
        Settings(grace_period_ms=-1)


def test_get_settings_ignores_none(monkeypatch):
    """None overrides leave environment values in place."""
    monkeypatch.setenv("RESTARTER_USE_SUDO", "true")

    assert get_settings(use_sudo=None).use_sudo is True
    assert get_settings(use_sudo=False).use_sudo is False


def test_fallback_dirs_not_shared():
    first = Settings()
    first.fallback_dirs.append("/tmp")

    assert Settings().fallback_dirs == DEFAULT_FALLBACK_DIRS
