"""Command line entry point."""

import click
import uvicorn

from .core.config import get_settings
from .parsers import list_available_parsers


@click.group()
def cli():
    """PDF parsing service."""


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST).")
@click.option("--port", type=int, default=None, help="Listen port (defaults to PORT, 4000).")
@click.option("--reload/--no-reload", default=None, help="Reload on code changes.")
def serve(host, port, reload):
    """Run the HTTP server."""
    settings = get_settings()

    uvicorn.run(
        "pdf_service.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=settings.reload if reload is None else reload,
        log_level=settings.log_level.lower(),
    )


@cli.command()
def backends():
    """List the available PDF backends."""
    for name, description in list_available_parsers().items():
        click.echo(f"{name:<12} {description}")


if __name__ == "__main__":
    cli()
