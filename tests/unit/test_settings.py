import pytest
from pydantic import ValidationError

from credential_guard.config.settings import Settings

SETTINGS_ENV = (
    "LOG_LEVEL",
    "GENERATED_PASSWORD_LENGTH",
    "REQUIRE_STRONG_PASSWORDS",
    "CREDENTIAL_PASSWORD_FILE",
)


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)


def test_defaults_are_deterministic(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.generated_password_length == 16
    assert settings.require_strong_passwords is True
    assert settings.credential_password_file is None


def test_env_values_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GENERATED_PASSWORD_LENGTH", "24")
    monkeypatch.setenv("REQUIRE_STRONG_PASSWORDS", "false")
    monkeypatch.setenv("CREDENTIAL_PASSWORD_FILE", "/run/secrets/password")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.generated_password_length == 24
    assert settings.require_strong_passwords is False
    assert settings.credential_password_file == "/run/secrets/password"


def test_generated_password_length_below_minimum_raises_validation_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("GENERATED_PASSWORD_LENGTH", "4")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_password_file_raises_validation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CREDENTIAL_PASSWORD_FILE", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
