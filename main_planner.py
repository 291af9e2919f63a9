"""Mini README: Entry point CLI for launching the CleanSaveUp dashboard.

This script exposes a Typer CLI that starts the FastAPI dashboard with a
configurable host, port and production flag. Defaults come from
``CLEANSAVEUP_*`` environment variables, and logging is configured once
before the server starts.
"""

from __future__ import annotations

import typer
import uvicorn

from cleansaveup.configuration import get_settings
from cleansaveup.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the CleanSaveUp budgeting dashboard.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcards directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting CleanSaveUp on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}\n"
        "Budgets live in memory only and are lost when the server stops."
    )
    uvicorn.run(
        "cleansaveup.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
