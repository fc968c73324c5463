"""CLI entry point for the LMS server."""

from __future__ import annotations

import sys

import click
import uvicorn

from lms import APP_VERSION
from lms.config import ConfigError, Settings
from lms.logging import setup_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=APP_VERSION, prog_name="lms")
def main() -> None:
    """LMS - a minimal Learning Management System REST API."""
    pass


@main.command()
@click.option("--host", default=None, help="Bind address (default: LMS_HOST or 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Bind port (default: LMS_PORT or 3000)")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: LMS_LOG_LEVEL or INFO)",
)
@click.option("--reload", is_flag=True, help="Restart the server when code changes")
def serve(host: str | None, port: int | None, log_level: str | None, reload: bool) -> None:
    """Run the API server with uvicorn."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    host = host if host is not None else settings.host
    port = port if port is not None else settings.port
    level = (log_level or settings.log_level).upper()

    setup_logging(log_dir=settings.log_dir, level=level)

    click.echo(f"LMS server running on http://{host}:{port}")
    click.echo(f"Health check: http://{host}:{port}/health")
    click.echo(f"API documentation: http://{host}:{port}/")

    uvicorn.run(
        "lms.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=level.lower(),
    )


if __name__ == "__main__":
    main()
