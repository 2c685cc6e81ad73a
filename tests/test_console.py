"""Mini README: Tests for the interactive console front-end.

The console loop is driven with scripted prompts, and the Typer CLI is
exercised through ``CliRunner`` with piped input.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import pytest
from typer.testing import CliRunner

from expenditure_app.configuration import get_settings
from expenditure_app.interface import render_screen, run_console
from expenditure_app.navigation import Screen
from expenditure_app.session import ExpenditureSession


@pytest.fixture()
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Re-read settings per test and restore the root logging level afterwards."""

    root_level = logging.getLogger().level
    monkeypatch.delenv("EXPENDITURE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
    logging.getLogger().setLevel(root_level)


def _scripted(responses: Iterable[str]):
    remaining = iter(responses)

    def prompt(_: str) -> str:
        return next(remaining)

    return prompt


def _run(responses: List[str]):
    output: List[str] = []
    session = run_console(
        ExpenditureSession(), prompt=_scripted(responses), echo=output.append
    )
    return session, output


def test_console_records_taxi_and_school_fees() -> None:
    session, output = _run(
        [
            "1", "1", "100", "abc", "250", "b",
            "3", "a", "Term 1", "5000", "a", "", "1000", "b",
            "4", "q",
        ]
    )

    assert session.ledger.taxi_entries == (100, 250)
    assert [entry.description for entry in session.ledger.school_fee_entries] == ["Term 1"]
    assert "Enter a whole number amount." in output
    assert "Enter a description and a whole number amount." in output
    assert "Total Spent: Ksh 5350" in output
    assert output[-1] == "Goodbye. Total spent this session: Ksh 5350"


@pytest.mark.parametrize("description", ["B", "b", "Q", "q"])
def test_console_records_fee_described_like_a_command(description: str) -> None:
    """Descriptions are free text, even when they match a command letter."""

    session, _ = _run(["1", "3", "a", description, "500", "q"])

    assert session.screen is Screen.SCHOOL_FEES_INPUT
    assert [(entry.description, entry.amount) for entry in session.ledger.school_fee_entries] == [
        (description, 500)
    ]


def test_console_school_fees_rejects_unknown_command() -> None:
    session, output = _run(["1", "3", "Term 1", "b", "q"])

    assert "Unknown choice 'Term 1'." in output
    assert session.ledger.school_fee_entries == ()
    assert session.screen is Screen.MENU


def test_console_back_from_menu_returns_home() -> None:
    session, output = _run(["1", "b", "q"])

    assert session.screen is Screen.HOME
    assert output.count("== Welcome to Expenditure App ==") == 2


def test_console_reports_unknown_choices() -> None:
    _, output = _run(["9", "1", "rent", "q"])

    assert "Unknown choice '9'." in output
    assert "Unknown choice 'rent'." in output


def test_render_food_screen_lists_entries() -> None:
    session = ExpenditureSession()
    session.start()
    session.select_category("food")
    session.submit_amount("30")

    lines = render_screen(session)

    assert "== Food Spending ==" in lines
    assert "  - Ksh 30" in lines
    assert lines[-1] == "Total: Ksh 30"


def test_cli_console_command(isolated_settings) -> None:
    from main_expenditure_app import cli

    result = CliRunner().invoke(cli, ["console"], input="1\n2\n45\nq\n")

    assert result.exit_code == 0, result.output
    assert "Food Spending" in result.output
    assert "Total spent this session: Ksh 45" in result.output


def test_cli_console_applies_configured_log_level(isolated_settings) -> None:
    from main_expenditure_app import cli

    isolated_settings.setenv("EXPENDITURE_LOG_LEVEL", "debug")

    result = CliRunner().invoke(cli, ["console"], input="q\n")

    assert result.exit_code == 0, result.output
    assert logging.getLogger().level == logging.DEBUG
