"""Mini README: Entry point CLI for the expenditure tracker.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI JSON interface under uvicorn and ``console`` opens the interactive
terminal front-end. Both read defaults from ``EXPENDITURE_`` environment
variables through the shared settings.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from expenditure_app.configuration import get_settings
from expenditure_app.interface import run_console
from expenditure_app.logging_utils import configure_root_logger
from expenditure_app.session import ExpenditureSession

cli = typer.Typer(help="Track taxi, food and school-fee spending.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: Optional[bool] = typer.Option(
        None,
        "--production/--development",
        help=(
            "Use production server settings (disable auto-reload)."
            " Defaults to EXPENDITURE_ENVIRONMENT=production."
        ),
    ),
) -> None:
    """Start the JSON interface using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    effective_production = settings.is_production if production is None else production
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Expenditure Tracker ({settings.environment}) on {effective_host}:{effective_port}.\n"
        f"Current state: http://{browser_host}:{effective_port}/"
    )
    uvicorn.run(
        "expenditure_app.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not effective_production,
    )


@cli.command()
def console(
    currency: str = typer.Option(None, help="Currency label shown before amounts."),
) -> None:
    """Track spending interactively in the terminal."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    run_console(ExpenditureSession(currency_label=currency or settings.currency_label))


if __name__ == "__main__":
    cli()
