"""Mini README: Interactive terminal front-end for the expenditure tracker.

Structure:
    * render_screen - text rendering of the session's current screen.
    * run_console - prompt loop forwarding typed commands to the session.

The console mirrors the mobile screens: numbered choices on the home and
menu screens, a typed amount on the taxi and food screens, and ``a`` to add
a described fee on the school-fees screen. ``b`` steps back and ``q`` quits
from every command prompt; the description and amount prompts that follow
``a`` take free text only. Prompt and echo callables are injectable so the
loop can be driven by scripted input.
"""

from __future__ import annotations

from typing import Callable, List

import typer

from ..finance import ExpenseCategory
from ..logging_utils import get_logger
from ..navigation import MenuOption, Screen
from ..session import ExpenditureSession

LOGGER = get_logger(__name__)

ADD_COMMAND = "a"
BACK_COMMAND = "b"
QUIT_COMMAND = "q"

Prompt = Callable[[str], str]
Echo = Callable[[str], None]


def _default_prompt(text: str) -> str:
    return typer.prompt(text, default="", show_default=False)


def render_screen(session: ExpenditureSession) -> List[str]:
    """Describe the current screen as printable lines."""

    screen = session.screen
    lines = ["", f"== {screen.heading} =="]
    if screen is Screen.HOME:
        lines.append(f"  1. Go to Spending   {QUIT_COMMAND}. Quit")
    elif screen is Screen.MENU:
        for index, option in enumerate(MenuOption, start=1):
            lines.append(f"  {index}. {option.label}")
        lines.append(f"  {BACK_COMMAND}. Back to Home")
    elif screen in (Screen.TAXI_INPUT, Screen.FOOD_INPUT):
        category = ExpenseCategory.TAXI if screen is Screen.TAXI_INPUT else ExpenseCategory.FOOD
        for amount in session.ledger.entries(category):
            lines.append(f"  - {session.format(amount)}")
        lines.append(f"Total: {session.format(session.ledger.total(category))}")
    elif screen is Screen.SCHOOL_FEES_INPUT:
        for entry in session.ledger.school_fee_entries:
            lines.append(f"  - {entry.description}: {session.format(entry.amount)}")
        lines.append(f"Total School Fees: {session.format(session.totals().school_fee_total)}")
    elif screen is Screen.SUMMARY:
        totals = session.totals()
        lines.extend(
            [
                f"Taxi: {session.format(totals.taxi_total)}",
                f"Food: {session.format(totals.food_total)}",
                f"School Fees: {session.format(totals.school_fee_total)}",
                f"Total Spent: {session.format(totals.grand_total)}",
            ]
        )
    return lines


def _handle_menu_choice(session: ExpenditureSession, choice: str, echo: Echo) -> None:
    options = list(MenuOption)
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        session.select_category(options[int(choice) - 1])
        return
    try:
        session.select_category(choice)
    except ValueError:
        echo(f"Unknown choice '{choice}'.")


def run_console(
    session: ExpenditureSession,
    *,
    prompt: Prompt = _default_prompt,
    echo: Echo = typer.echo,
) -> ExpenditureSession:
    """Drive the session from typed commands until the user quits."""

    LOGGER.info("Console session started")
    while True:
        for line in render_screen(session):
            echo(line)
        screen = session.screen

        hint = f"({BACK_COMMAND} = back, {QUIT_COMMAND} = quit)"
        if screen in (Screen.TAXI_INPUT, Screen.FOOD_INPUT):
            label = "Amount " + hint
        elif screen is Screen.SCHOOL_FEES_INPUT:
            label = f"Choice ({ADD_COMMAND} = add fee, {BACK_COMMAND} = back, {QUIT_COMMAND} = quit)"
        else:
            label = "Choice " + hint
        command = prompt(label).strip()
        lowered = command.lower()
        if lowered == QUIT_COMMAND:
            break
        if lowered == BACK_COMMAND:
            session.go_back()
        elif screen is Screen.HOME:
            if command == "1":
                session.start()
            else:
                echo(f"Unknown choice '{command}'.")
        elif screen is Screen.MENU:
            _handle_menu_choice(session, command, echo)
        elif screen in (Screen.TAXI_INPUT, Screen.FOOD_INPUT):
            if not session.submit_amount(command):
                echo("Enter a whole number amount.")
        elif screen is Screen.SCHOOL_FEES_INPUT:
            if lowered == ADD_COMMAND:
                # Free text here: "b" or "q" is a description, not a command.
                description = prompt("Description")
                amount = prompt("Amount")
                if not session.submit_labeled_entry(description, amount):
                    echo("Enter a description and a whole number amount.")
            else:
                echo(f"Unknown choice '{command}'.")
        else:
            echo(f"Only '{BACK_COMMAND}' or '{QUIT_COMMAND}' work here.")

    totals = session.totals()
    echo(f"Goodbye. Total spent this session: {session.format(totals.grand_total)}")
    LOGGER.info("Console session ended with grand total %s", totals.grand_total)
    return session
