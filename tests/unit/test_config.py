"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import logging

from payvalid.core.config import AppSettings, ValidationConfig
from payvalid.core.log import configure_logging, mask_identifier


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.validation.log_rejections is True


def test_validation_config_env_override(monkeypatch):
    monkeypatch.setenv("PAYVALID_VALIDATION_LOG_REJECTIONS", "false")
    assert ValidationConfig().log_rejections is False


def test_app_settings_env_override(monkeypatch):
    monkeypatch.setenv("PAYVALID_ENVIRONMENT", "prod")
    monkeypatch.setenv("PAYVALID_LOG_LEVEL", "debug")
    settings = AppSettings()
    assert settings.environment == "prod"
    assert settings.log_level == "debug"


def test_configure_logging_applies_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging(AppSettings(log_level="debug"))
    assert calls["level"] == "DEBUG"


def test_mask_identifier():
    assert mask_identifier("DEUTDEFF500") == "DEUT*******"
    assert mask_identifier("DEU") == "***"
    assert mask_identifier(None) == "<none>"
    assert mask_identifier(42) == "<int>"
