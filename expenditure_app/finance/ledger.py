"""Mini README: In-memory expenditure ledger for taxi, food and school fees.

Structure:
    * ExpenseCategory - enum of the three spending categories.
    * LabeledEntry - immutable (description, amount) school-fee record.
    * LedgerTotals - per-category sums plus the grand total.
    * ExpenditureLedger - append-only store exposing derived totals.

Entries are never edited or removed once recorded, and totals are always
recomputed from the entries rather than cached. The ledger expects amounts
that have already been parsed; raw user text is handled by the session.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class ExpenseCategory(str, Enum):
    """Enumerate the spending categories tracked by the ledger."""

    TAXI = "taxi"
    FOOD = "food"
    SCHOOL_FEES = "school_fees"

    @classmethod
    def from_str(cls, value: str) -> "ExpenseCategory":
        """Coerce arbitrary casing and separators into a valid category."""

        try:
            normalised = value.strip().lower().replace("-", "_").replace(" ", "_")
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported expense category: {value}") from error


@dataclass(frozen=True, slots=True)
class LabeledEntry:
    """One school-fee payment with the description the user typed."""

    description: str
    amount: int

    def as_dict(self) -> Dict[str, object]:
        return {"description": self.description, "amount": self.amount}


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    """Derived sums for each category."""

    taxi_total: int = 0
    food_total: int = 0
    school_fee_total: int = 0

    @property
    def grand_total(self) -> int:
        return self.taxi_total + self.food_total + self.school_fee_total

    def as_dict(self) -> Dict[str, int]:
        return {
            "taxi_total": self.taxi_total,
            "food_total": self.food_total,
            "school_fee_total": self.school_fee_total,
            "grand_total": self.grand_total,
        }


def _validate_amount(amount: object) -> int:
    """Ensure amounts are plain, non-negative integers."""

    # bool is an int subclass but never a meaningful amount.
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amounts must be whole numbers, got {amount!r}")
    if amount < 0:
        raise ValueError(f"Amounts cannot be negative, got {amount}")
    return amount


class ExpenditureLedger:
    """Record spending per category and derive totals on demand."""

    def __init__(
        self,
        *,
        taxi_entries: Optional[Iterable[int]] = None,
        food_entries: Optional[Iterable[int]] = None,
        school_fee_entries: Optional[Iterable[LabeledEntry]] = None,
    ) -> None:
        self._taxi_entries: List[int] = []
        self._food_entries: List[int] = []
        self._school_fee_entries: List[LabeledEntry] = []
        for amount in taxi_entries or ():
            self._taxi_entries.append(_validate_amount(amount))
        for amount in food_entries or ():
            self._food_entries.append(_validate_amount(amount))
        for entry in school_fee_entries or ():
            self.add_labeled_entry(entry.description, entry.amount)
        LOGGER.debug(
            "Expenditure ledger initialised with taxi=%s food=%s school_fees=%s entries",
            len(self._taxi_entries),
            len(self._food_entries),
            len(self._school_fee_entries),
        )

    @property
    def taxi_entries(self) -> Tuple[int, ...]:
        return tuple(self._taxi_entries)

    @property
    def food_entries(self) -> Tuple[int, ...]:
        return tuple(self._food_entries)

    @property
    def school_fee_entries(self) -> Tuple[LabeledEntry, ...]:
        return tuple(self._school_fee_entries)

    def add_amount(self, category: Union[ExpenseCategory, str], amount: int) -> int:
        """Append an amount-only entry to the taxi or food sequence."""

        if not isinstance(category, ExpenseCategory):
            category = ExpenseCategory.from_str(category)
        if category is ExpenseCategory.SCHOOL_FEES:
            raise ValueError("School fees require a description; use add_labeled_entry.")
        amount = _validate_amount(amount)
        target = self._taxi_entries if category is ExpenseCategory.TAXI else self._food_entries
        target.append(amount)
        LOGGER.info("Recorded %s entry of %s (%s entries)", category.value, amount, len(target))
        return amount

    def add_labeled_entry(self, description: str, amount: int) -> LabeledEntry:
        """Append a described school-fee payment."""

        if not isinstance(description, str) or not description.strip():
            raise ValueError("School-fee entries need a non-blank description.")
        entry = LabeledEntry(description=description.strip(), amount=_validate_amount(amount))
        self._school_fee_entries.append(entry)
        LOGGER.info(
            "Recorded school fee '%s' of %s (%s entries)",
            entry.description,
            entry.amount,
            len(self._school_fee_entries),
        )
        return entry

    def entries(self, category: Union[ExpenseCategory, str]) -> Tuple[object, ...]:
        """Return the recorded entries for a category in insertion order."""

        if not isinstance(category, ExpenseCategory):
            category = ExpenseCategory.from_str(category)
        if category is ExpenseCategory.TAXI:
            return self.taxi_entries
        if category is ExpenseCategory.FOOD:
            return self.food_entries
        return self.school_fee_entries

    def total(self, category: Union[ExpenseCategory, str]) -> int:
        """Sum a single category; empty categories total zero."""

        if not isinstance(category, ExpenseCategory):
            category = ExpenseCategory.from_str(category)
        if category is ExpenseCategory.SCHOOL_FEES:
            return sum(entry.amount for entry in self._school_fee_entries)
        return sum(self.entries(category))

    def totals(self) -> LedgerTotals:
        """Recompute every category total from the recorded entries."""

        return LedgerTotals(
            taxi_total=self.total(ExpenseCategory.TAXI),
            food_total=self.total(ExpenseCategory.FOOD),
            school_fee_total=self.total(ExpenseCategory.SCHOOL_FEES),
        )

    def export_snapshot(self) -> Dict[str, object]:
        """Export entries and totals with JSON-friendly values."""

        return {
            "entries": {
                ExpenseCategory.TAXI.value: list(self._taxi_entries),
                ExpenseCategory.FOOD.value: list(self._food_entries),
                ExpenseCategory.SCHOOL_FEES.value: [
                    entry.as_dict() for entry in self._school_fee_entries
                ],
            },
            "totals": self.totals().as_dict(),
        }
