"""Mini README: FastAPI JSON interface for the expenditure tracker.

Structure:
    * create_application - application factory wiring routes to a session.

Each application instance owns one in-memory ``ExpenditureSession``. Every
route forwards a single user event and answers with the state needed to draw
the next screen, so any client (a mobile shell, a browser page, ``curl``)
can act as the presentation layer.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..logging_utils import configure_root_logger, get_logger
from ..navigation import MenuOption
from ..session import ExpenditureSession, ScreenMismatchError

LOGGER = get_logger(__name__)


def create_application(session: Optional[ExpenditureSession] = None) -> FastAPI:
    """Create the FastAPI application bound to a single tracking session."""

    settings = get_settings()
    # uvicorn reload builds the app in a child process, so apply the level here.
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Expenditure Tracker", version="0.1.0")
    if session is None:
        session = ExpenditureSession(currency_label=settings.currency_label)
    app.state.session = session

    def _submission(accepted: bool) -> JSONResponse:
        return JSONResponse({"accepted": accepted, "state": session.snapshot()})

    @app.get("/")
    async def current_state() -> JSONResponse:
        """Return the active screen with entries and totals."""

        return JSONResponse(session.snapshot())

    @app.post("/start")
    async def start() -> JSONResponse:
        """Move from the home screen to the category menu."""

        session.start()
        return JSONResponse(session.snapshot())

    @app.post("/select/{option}")
    async def select_category(option: str) -> JSONResponse:
        """Open the screen for a menu selection."""

        try:
            parsed = MenuOption.from_str(option)
        except ValueError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        session.select_category(parsed)
        return JSONResponse(session.snapshot())

    @app.post("/back")
    async def go_back() -> JSONResponse:
        """Step back one screen."""

        session.go_back()
        return JSONResponse(session.snapshot())

    @app.post("/amounts")
    async def submit_amount(amount: str = Form("")) -> JSONResponse:
        """Record a taxi or food amount typed on the current screen."""

        try:
            accepted = session.submit_amount(amount)
        except ScreenMismatchError as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        LOGGER.debug("Amount submission accepted=%s on %s", accepted, session.screen.value)
        return _submission(accepted)

    @app.post("/school-fees")
    async def submit_school_fee(
        description: str = Form(""),
        amount: str = Form(""),
    ) -> JSONResponse:
        """Record a described school-fee payment."""

        try:
            accepted = session.submit_labeled_entry(description, amount)
        except ScreenMismatchError as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        LOGGER.debug("School fee submission accepted=%s", accepted)
        return _submission(accepted)

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return totals with display labels for the summary screen."""

        totals = session.totals()
        labels: Dict[str, str] = {
            "Taxi": session.format(totals.taxi_total),
            "Food": session.format(totals.food_total),
            "School Fees": session.format(totals.school_fee_total),
            "Total Spent": session.format(totals.grand_total),
        }
        return JSONResponse({"totals": totals.as_dict(), "labels": labels})

    return app
