"""Mini README: Utility helpers shared by the expenditure tracker front-ends.

Exports amount parsing and formatting so every surface validates and prints
amounts the same way.
"""

from .amounts import format_amount, parse_amount

__all__ = ["format_amount", "parse_amount"]
