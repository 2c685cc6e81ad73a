"""Mini README: Helpers for turning raw text into amounts and back.

Keeping parsing separate from the ledger lets the web and console front-ends
share one definition of "a valid amount" without importing each other.
"""

from __future__ import annotations

import re
from typing import Optional

_AMOUNT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_amount(raw: Optional[str]) -> Optional[int]:
    """Return the whole, non-negative amount typed by the user, or ``None``.

    Surrounding whitespace is ignored. Decimals, signs other than a leading
    ``+``, digit separators and any other text are rejected.
    """

    if raw is None:
        return None
    candidate = raw.strip()
    if not _AMOUNT_PATTERN.fullmatch(candidate):
        return None
    return int(candidate)


def format_amount(amount: int, currency_label: str = "Ksh") -> str:
    """Render an amount with its currency label for display."""

    return f"{currency_label} {amount}"
