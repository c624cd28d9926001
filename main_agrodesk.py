"""Mini README: Entry point CLI for launching the Agrodesk farm page.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags. Defaults come from the
``AGRODESK_*`` environment variables.
"""

from __future__ import annotations

import typer
import uvicorn

from agrodesk.configuration import get_settings
from agrodesk.logging_utils import apply_environment_level

cli = typer.Typer(help="Launch the Agrodesk farm record-keeping page.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    apply_environment_level(settings.environment)

    # Browsers cannot open 0.0.0.0 directly, so point operators at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Agrodesk on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    typer.echo(f"Records are stored in {settings.storage_path}")
    uvicorn.run(
        "agrodesk.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
