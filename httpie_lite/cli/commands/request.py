"""
Request Commands.

The get and post commands: send one request, render the response.
"""

import asyncio
from typing import List, Optional

import typer
from rich.console import Console
from rich.text import Text

from httpie_lite.cli.client import close_http_client, get_http_client
from httpie_lite.cli.parsing import kv_pair_param, url_param
from httpie_lite.cli.render import ResponseRenderer, build_console
from httpie_lite.cli.schemas import Command, GetCommand, KvPair, PostCommand
from httpie_lite.core.config import get_app_config
from httpie_lite.core.exceptions import ApplicationError
from httpie_lite.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
err_console = Console(stderr=True)


def get(
    url: str = typer.Argument(..., parser=url_param, help="Absolute URL to request"),
) -> None:
    """
    Send an HTTP GET request and print the response.

    Examples:
        httpie-lite get https://httpbin.org/get
    """
    _run(GetCommand(url=url))


def post(
    url: str = typer.Argument(..., parser=url_param, help="Absolute URL to request"),
    body: Optional[List[KvPair]] = typer.Argument(
        None,
        parser=kv_pair_param,
        metavar="[KEY=VALUE]...",
        help="Fields of the JSON request body",
    ),
) -> None:
    """
    Send an HTTP POST request with a JSON body and print the response.

    Each KEY=VALUE pair becomes one string field. A repeated key keeps its
    last value.

    Examples:
        httpie-lite post https://httpbin.org/post name=alice role=admin
    """
    _run(PostCommand(url=url, body=tuple(body or ())))


def _run(command: Command) -> None:
    """Run a command to completion, turning application errors into exit code 1."""
    log_with_source(logger, "cli", "debug", "Parsed command", command=repr(command))

    try:
        asyncio.run(_execute(command))
    except ApplicationError as e:
        err_console.print(Text(f"Error: {e.message}", style="red"), soft_wrap=True)
        raise typer.Exit(1)


async def _execute(command: Command) -> None:
    """Async implementation shared by get and post."""
    output = get_app_config().output
    client = get_http_client()

    try:
        response = await client.execute(command)
        renderer = ResponseRenderer(build_console(output), output)
        renderer.render(response)
    finally:
        await close_http_client()
