from __future__ import annotations

import pytest

from quantum_bookstore.config import AppSettings
from quantum_bookstore.container import build_container
from quantum_bookstore.fulfillment import LoggingShippingService


def test_build_container_wires_store(channels) -> None:
    settings = AppSettings(environment="test", current_year=2030)

    container = build_container(settings, channels=channels)

    assert container.settings is settings
    assert container.channels is channels
    assert len(container.store) == 0
    assert container.resolve_year() == 2030


def test_build_container_defaults_to_logging_channels() -> None:
    container = build_container(AppSettings())
    assert isinstance(container.channels.shipping, LoggingShippingService)
    assert container.resolve_year() >= 2025


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUANTUM_BOOKSTORE_ENV", "test")
    monkeypatch.setenv("QUANTUM_BOOKSTORE_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUANTUM_BOOKSTORE_CURRENT_YEAR", "2025")
    monkeypatch.setenv("QUANTUM_BOOKSTORE_MAX_AGE", "0")

    settings = AppSettings.from_env()

    assert settings.environment == "test"
    assert settings.log_level == "DEBUG"
    assert settings.current_year == 2025
    assert settings.default_max_age == 0


def test_settings_reject_non_integer_year(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUANTUM_BOOKSTORE_CURRENT_YEAR", "soon")
    with pytest.raises(ValueError, match="QUANTUM_BOOKSTORE_CURRENT_YEAR"):
        AppSettings.from_env()


def test_settings_reject_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUANTUM_BOOKSTORE_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="QUANTUM_BOOKSTORE_LOG_LEVEL"):
        AppSettings.from_env()
