"""Mini README: Front-ends for the expenditure tracker (web and console).

Exports the FastAPI application factory and the interactive console loop.
Both only forward user events to an ``ExpenditureSession`` and render what
it reports back.
"""

from .console import render_screen, run_console
from .web_app import create_application

__all__ = ["create_application", "render_screen", "run_console"]
