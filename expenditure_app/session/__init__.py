"""Mini README: The per-user session that front-ends talk to.

Exports ``ExpenditureSession`` together with ``ScreenMismatchError`` so the
web and console interfaces can tell a misplaced event apart from rejected
input.
"""

from .controller import ExpenditureSession, ScreenMismatchError

__all__ = ["ExpenditureSession", "ScreenMismatchError"]
