"""
CLI Entry Point.

Typer application wiring the request commands and the global logging flags.

Usage:
    httpie-lite --help
    httpie-lite get https://httpbin.org/get
    httpie-lite post https://httpbin.org/post a=1 b=2
    httpie-lite --debug get https://httpbin.org/get

Options:
    --verbose, -v     Enable INFO level logging
    --debug, -d       Enable DEBUG level logging
    --version         Show version and exit
"""

from typing import Optional

import structlog
import typer

from httpie_lite import __version__
from httpie_lite.cli.commands import get, post
from httpie_lite.core.logging import setup_logging

app = typer.Typer(
    name="httpie-lite",
    help="httpie-lite - send one HTTP request and pretty-print the response.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(get)
app.command()(post)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"httpie-lite {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    httpie-lite - send one HTTP request and pretty-print the response.

    Logs go to stderr; the response goes to stdout.
    """
    if debug:
        setup_logging(level="DEBUG")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()

    structlog.contextvars.bind_contextvars(source="cli")


if __name__ == "__main__":
    app()
