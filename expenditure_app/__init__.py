"""Mini README: Core package initializer for the expenditure tracker.

The package tracks taxi, food and school-fee spending for a single in-memory
session. Sub-packages split the work the same way the app is used:
``navigation`` knows which screen is showing, ``finance`` records entries
and derives totals, ``session`` wires both together behind the user events,
and ``interface`` hosts the web and console front-ends.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
