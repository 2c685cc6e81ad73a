"""Mini README: Navigation between the app's screens.

Exports the ``Screen`` and ``MenuOption`` enumerations together with the
``ScreenNavigator`` that moves between them.
"""

from .state_machine import MenuOption, Screen, ScreenNavigator

__all__ = ["MenuOption", "Screen", "ScreenNavigator"]
