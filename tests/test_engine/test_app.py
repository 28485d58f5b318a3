"""Tests for the engine factory and settings."""

from s52engine.app import create_engine, register_procedures
from s52engine.config import Settings


def test_register_procedures_is_repeatable():
    first = register_procedures()
    second = register_procedures()
    assert first is second
    assert first.count == 8


def test_create_engine():
    registry = create_engine()
    assert registry.count == 8


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("S52_LOG_LEVEL", "debug")
    monkeypatch.setenv("S52_ENV", "test")
    settings = Settings()
    assert settings.s52_log_level == "debug"
    assert settings.s52_env == "test"
