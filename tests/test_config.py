"""Tests for environment-driven settings."""

from app.config import DEFAULT_RESOURCES, load_settings


def test_defaults(monkeypatch):
    for name in ("BOOKING_RESOURCES", "BOOKING_SEED_DATA", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.resources == DEFAULT_RESOURCES
    assert settings.seed_sample_data is False
    assert settings.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("BOOKING_RESOURCES", " Room 1, Room 2 ,, ")
    monkeypatch.setenv("BOOKING_SEED_DATA", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.resources == ["Room 1", "Room 2"]
    assert settings.seed_sample_data is True
    assert settings.log_level == "DEBUG"
