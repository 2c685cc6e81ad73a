"""Mini README: Tests for environment-driven settings.

Structure:
    * overrides - ``EXPENDITURE_`` variables reach the cached settings.
    * validation - blank labels, unknown log levels and bad ports fail.
    * run command - the environment decides auto-reload unless a flag wins.
"""

from __future__ import annotations

from typing import Dict, List

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from expenditure_app.configuration import ExpenditureSettings, get_settings

_SETTING_NAMES = (
    "ENVIRONMENT",
    "INTERFACE_HOST",
    "INTERFACE_PORT",
    "CURRENCY_LABEL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Start every test from defaults and never leak cached settings."""

    for name in _SETTING_NAMES:
        monkeypatch.delenv(f"EXPENDITURE_{name}", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = ExpenditureSettings(_env_file=None)

    assert settings.environment == "development"
    assert settings.is_production is False
    assert settings.interface_port == 8000
    assert settings.currency_label == "Ksh"
    assert settings.log_level == "INFO"


def test_prefixed_environment_overrides(clean_environment) -> None:
    clean_environment.setenv("EXPENDITURE_INTERFACE_PORT", "9001")
    clean_environment.setenv("EXPENDITURE_CURRENCY_LABEL", "  KES ")
    clean_environment.setenv("EXPENDITURE_LOG_LEVEL", "debug")
    clean_environment.setenv("EXPENDITURE_ENVIRONMENT", "Production")

    settings = get_settings()

    assert settings.interface_port == 9001
    assert settings.currency_label == "KES"
    assert settings.log_level == "DEBUG"
    assert settings.is_production is True
    assert get_settings() is settings


def test_unprefixed_variables_are_ignored(clean_environment) -> None:
    clean_environment.setenv("CURRENCY_LABEL", "USD")

    assert get_settings().currency_label == "Ksh"


@pytest.mark.parametrize("label", ["", "   "])
def test_blank_currency_label_is_rejected(label: str) -> None:
    with pytest.raises(ValidationError):
        ExpenditureSettings(_env_file=None, currency_label=label)


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ExpenditureSettings(_env_file=None, log_level="chatty")


@pytest.mark.parametrize("port", [0, 65536, -1])
def test_port_outside_range_is_rejected(port: int) -> None:
    with pytest.raises(ValidationError):
        ExpenditureSettings(_env_file=None, interface_port=port)


@pytest.mark.parametrize("port", [1, 65535])
def test_port_range_bounds_are_accepted(port: int) -> None:
    assert ExpenditureSettings(_env_file=None, interface_port=port).interface_port == port


@pytest.fixture()
def uvicorn_calls(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, object]]:
    import main_expenditure_app

    calls: List[Dict[str, object]] = []

    def fake_run(app: str, **kwargs: object) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(main_expenditure_app.uvicorn, "run", fake_run)
    return calls


@pytest.mark.parametrize(
    "environment, args, expected_reload",
    [
        ("development", [], True),
        ("production", [], False),
        ("production", ["--development"], True),
        ("development", ["--production"], False),
    ],
)
def test_run_reload_follows_environment(
    clean_environment, uvicorn_calls, environment: str, args: List[str], expected_reload: bool
) -> None:
    from main_expenditure_app import cli

    clean_environment.setenv("EXPENDITURE_ENVIRONMENT", environment)
    clean_environment.setenv("EXPENDITURE_INTERFACE_PORT", "9100")

    result = CliRunner().invoke(cli, ["run", *args])

    assert result.exit_code == 0, result.output
    assert len(uvicorn_calls) == 1
    assert uvicorn_calls[0]["reload"] is expected_reload
    assert uvicorn_calls[0]["port"] == 9100
    assert uvicorn_calls[0]["factory"] is True
