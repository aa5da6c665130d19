from __future__ import annotations

import pytest

from testkit.config import AppSettings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TESTKIT_ENV", "TESTKIT_LOG_LEVEL", "TESTKIT_REGISTER_BUILTINS"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings == AppSettings()
    assert settings.register_builtins is True


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TESTKIT_ENV", "ci")
    monkeypatch.setenv("TESTKIT_LOG_LEVEL", " debug ")
    monkeypatch.setenv("TESTKIT_REGISTER_BUILTINS", "no")

    settings = AppSettings.from_env()

    assert settings.environment == "ci"
    assert settings.log_level == "DEBUG"
    assert settings.register_builtins is False


def test_unknown_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TESTKIT_LOG_LEVEL", "chatty")

    assert AppSettings.from_env().log_level == "WARNING"
