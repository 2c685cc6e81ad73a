"""Mini README: Screen navigation state machine.

Structure:
    * Screen - closed set of views the app can show.
    * MenuOption - selections offered by the category menu.
    * ScreenNavigator - holds the active screen and applies transitions.

Back navigation is step-wise: every input screen and the summary return to
the menu, the menu returns home, and home has nowhere further to go. Events
a screen does not offer leave the state untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class Screen(str, Enum):
    """Enumerate every screen the app can display."""

    HOME = "home"
    MENU = "menu"
    TAXI_INPUT = "taxi"
    FOOD_INPUT = "food"
    SCHOOL_FEES_INPUT = "school_fees"
    SUMMARY = "summary"

    @property
    def heading(self) -> str:
        return SCREEN_TITLES[self]


class MenuOption(str, Enum):
    """Selections available on the category menu."""

    TAXI = "taxi"
    FOOD = "food"
    SCHOOL_FEES = "school_fees"
    SUMMARY = "summary"

    @classmethod
    def from_str(cls, value: str) -> "MenuOption":
        """Accept loose spellings such as ``School Fees`` or ``school-fees``."""

        try:
            normalised = value.strip().lower().replace("-", "_").replace(" ", "_")
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported menu option: {value}") from error

    @property
    def label(self) -> str:
        return MENU_LABELS[self]

    @property
    def destination(self) -> Screen:
        return MENU_DESTINATIONS[self]


SCREEN_TITLES: Dict[Screen, str] = {
    Screen.HOME: "Welcome to Expenditure App",
    Screen.MENU: "Select Spending Category",
    Screen.TAXI_INPUT: "Taxi Spending",
    Screen.FOOD_INPUT: "Food Spending",
    Screen.SCHOOL_FEES_INPUT: "School Fees",
    Screen.SUMMARY: "Spending Summary",
}

MENU_LABELS: Dict[MenuOption, str] = {
    MenuOption.TAXI: "Taxi",
    MenuOption.FOOD: "Food",
    MenuOption.SCHOOL_FEES: "School Fees",
    MenuOption.SUMMARY: "View Summary",
}

MENU_DESTINATIONS: Dict[MenuOption, Screen] = {
    MenuOption.TAXI: Screen.TAXI_INPUT,
    MenuOption.FOOD: Screen.FOOD_INPUT,
    MenuOption.SCHOOL_FEES: Screen.SCHOOL_FEES_INPUT,
    MenuOption.SUMMARY: Screen.SUMMARY,
}

# Home is absent on purpose: it has no back action.
BACK_DESTINATIONS: Dict[Screen, Screen] = {
    Screen.MENU: Screen.HOME,
    Screen.TAXI_INPUT: Screen.MENU,
    Screen.FOOD_INPUT: Screen.MENU,
    Screen.SCHOOL_FEES_INPUT: Screen.MENU,
    Screen.SUMMARY: Screen.MENU,
}

SCREEN_ACTIONS: Dict[Screen, Tuple[str, ...]] = {
    Screen.HOME: ("start",),
    Screen.MENU: ("select", "back"),
    Screen.TAXI_INPUT: ("submit_amount", "back"),
    Screen.FOOD_INPUT: ("submit_amount", "back"),
    Screen.SCHOOL_FEES_INPUT: ("submit_labeled_entry", "back"),
    Screen.SUMMARY: ("back",),
}


def _check_tables() -> None:
    """Fail at import time if a screen or option is missing from a table."""

    for table in (SCREEN_TITLES, SCREEN_ACTIONS):
        missing = set(Screen) - set(table)
        if missing:
            raise RuntimeError(f"Screens missing from navigation table: {sorted(missing)}")
    for table in (MENU_LABELS, MENU_DESTINATIONS):
        missing_options = set(MenuOption) - set(table)
        if missing_options:
            raise RuntimeError(f"Menu options missing from table: {sorted(missing_options)}")
    back_screens = {screen for screen, actions in SCREEN_ACTIONS.items() if "back" in actions}
    if back_screens != set(BACK_DESTINATIONS):
        raise RuntimeError("Back destinations disagree with the screens offering a back action")


_check_tables()


class ScreenNavigator:
    """Track the active screen and apply user-requested transitions."""

    def __init__(self, initial: Screen = Screen.HOME) -> None:
        self._current = initial
        LOGGER.debug("Navigator initialised on screen '%s'", initial.value)

    @property
    def current(self) -> Screen:
        return self._current

    def available_actions(self) -> List[str]:
        """Return the events the current screen offers, in display order."""

        return list(SCREEN_ACTIONS[self._current])

    def menu_options(self) -> List[MenuOption]:
        """Return menu selections when the menu is showing, otherwise nothing."""

        if self._current is not Screen.MENU:
            return []
        return list(MenuOption)

    def start(self) -> Screen:
        """Leave the home screen for the category menu."""

        if self._current is Screen.HOME:
            return self._move_to(Screen.MENU, "start")
        return self._ignore("start")

    def select(self, option: Union[MenuOption, str]) -> Screen:
        """Open the screen matching a menu selection."""

        if not isinstance(option, MenuOption):
            option = MenuOption.from_str(option)
        if self._current is Screen.MENU:
            return self._move_to(option.destination, f"select:{option.value}")
        return self._ignore(f"select:{option.value}")

    def go_back(self) -> Screen:
        """Step back one level: sub-screens to the menu, the menu to home."""

        destination = BACK_DESTINATIONS.get(self._current)
        if destination is None:
            return self._ignore("back")
        return self._move_to(destination, "back")

    def _move_to(self, destination: Screen, event: str) -> Screen:
        LOGGER.debug("Navigation %s: %s -> %s", event, self._current.value, destination.value)
        self._current = destination
        return destination

    def _ignore(self, event: str) -> Screen:
        LOGGER.debug("Ignoring '%s' on screen '%s'", event, self._current.value)
        return self._current
