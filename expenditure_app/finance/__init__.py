"""Mini README: Spending records and totals for the expenditure tracker.

The ledger keeps taxi and food amounts plus described school-fee payments in
memory for the life of a session and derives totals from them on request.
"""

from .ledger import ExpenditureLedger, ExpenseCategory, LabeledEntry, LedgerTotals

__all__ = ["ExpenditureLedger", "ExpenseCategory", "LabeledEntry", "LedgerTotals"]
