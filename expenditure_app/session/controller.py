"""Mini README: Session object combining navigation and the ledger.

Structure:
    * ScreenMismatchError - raised when an event is sent to a screen that
      does not offer it.
    * ExpenditureSession - accepts user events and exposes render state.

Front-ends forward button presses and raw text here and render whatever
``snapshot`` returns. Malformed input (text that is not a whole amount, or a
blank description) is rejected quietly: the submit method returns ``False``
and nothing changes, leaving any user feedback to the front-end.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from ..finance import ExpenditureLedger, ExpenseCategory, LedgerTotals
from ..logging_utils import get_logger
from ..navigation import MenuOption, Screen, ScreenNavigator
from ..utils import format_amount, parse_amount

LOGGER = get_logger(__name__)

AMOUNT_SCREENS: Dict[Screen, ExpenseCategory] = {
    Screen.TAXI_INPUT: ExpenseCategory.TAXI,
    Screen.FOOD_INPUT: ExpenseCategory.FOOD,
}


class ScreenMismatchError(ValueError):
    """An event was sent to a screen that does not accept it."""

    def __init__(self, event: str, screen: Screen) -> None:
        super().__init__(f"'{event}' is not available on the {screen.value} screen")
        self.event = event
        self.screen = screen


class ExpenditureSession:
    """Single owner of the navigation state and the ledger for one user."""

    def __init__(
        self,
        *,
        ledger: Optional[ExpenditureLedger] = None,
        navigator: Optional[ScreenNavigator] = None,
        currency_label: str = "Ksh",
    ) -> None:
        self.ledger = ledger if ledger is not None else ExpenditureLedger()
        self.navigator = navigator if navigator is not None else ScreenNavigator()
        self.currency_label = currency_label

    @property
    def screen(self) -> Screen:
        return self.navigator.current

    def start(self) -> Screen:
        return self.navigator.start()

    def select_category(self, option: Union[MenuOption, str]) -> Screen:
        return self.navigator.select(option)

    def go_back(self) -> Screen:
        return self.navigator.go_back()

    def submit_amount(self, raw_text: Optional[str]) -> bool:
        """Record an amount on the taxi or food screen.

        Returns ``False`` without touching the ledger when the text is not a
        whole, non-negative number.
        """

        category = AMOUNT_SCREENS.get(self.screen)
        if category is None:
            raise ScreenMismatchError("submit_amount", self.screen)
        amount = parse_amount(raw_text)
        if amount is None:
            LOGGER.debug("Rejected %s amount %r", category.value, raw_text)
            return False
        self.ledger.add_amount(category, amount)
        return True

    def submit_labeled_entry(
        self, raw_description: Optional[str], raw_amount: Optional[str]
    ) -> bool:
        """Record a school-fee payment; blank descriptions or bad amounts are ignored."""

        if self.screen is not Screen.SCHOOL_FEES_INPUT:
            raise ScreenMismatchError("submit_labeled_entry", self.screen)
        amount = parse_amount(raw_amount)
        if raw_description is None or not raw_description.strip() or amount is None:
            LOGGER.debug(
                "Rejected school fee description=%r amount=%r", raw_description, raw_amount
            )
            return False
        self.ledger.add_labeled_entry(raw_description, amount)
        return True

    def totals(self) -> LedgerTotals:
        return self.ledger.totals()

    def format(self, amount: int) -> str:
        return format_amount(amount, self.currency_label)

    def snapshot(self) -> Dict[str, object]:
        """Return everything a front-end needs to draw the current screen."""

        ledger_state = self.ledger.export_snapshot()
        return {
            "screen": self.screen.value,
            "title": self.screen.heading,
            "actions": self.navigator.available_actions(),
            "menu_options": [
                {"option": option.value, "label": option.label}
                for option in self.navigator.menu_options()
            ],
            "currency": self.currency_label,
            "entries": ledger_state["entries"],
            "totals": ledger_state["totals"],
        }
