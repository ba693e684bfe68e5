"""Entry point for the fargate-hello service."""

from __future__ import annotations

import click
from pydantic import ValidationError

from fargate_hello import __version__
from fargate_hello.config import AppSettings
from fargate_hello.logs import configure_logging
from fargate_hello.serve import run


@click.command()
@click.version_option(version=__version__, prog_name="fargate-hello")
@click.option("--host", default=None, help="Bind address (env: APP_HOST, HOST).")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=None,
    help="TCP port to listen on (env: APP_PORT, PORT).",
)
@click.option(
    "--request-timeout",
    type=float,
    default=None,
    help="Per-connection socket timeout in seconds.",
)
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stdout.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Minimum log level.",
)
def main(
    host: str | None,
    port: int | None,
    request_timeout: float | None,
    log_json: bool,
    log_level: str | None,
) -> None:
    """Answer GET / with a fixed greeting."""
    try:
        settings = AppSettings.from_cli(
            host=host,
            port=port,
            request_timeout=request_timeout,
            log_json=log_json or None,
            log_level=log_level,
        )
    except ValidationError as exc:
        raise click.UsageError(str(exc)) from exc

    configure_logging(level=settings.log_level, log_json=settings.log_json)
    run(settings)
