"""
Response Rendering.

Prints a response in three parts: status line, headers, body. The body
strategy is picked from the Content-Type header:

    application/json  → pretty-printed, JSON syntax highlighting
    text/html         → HTML syntax highlighting
    anything else     → raw text, verbatim

Highlighting is presentation only. When stdout is not a terminal the body
is written as plain text, never wrapped or re-tabbed by Rich.
"""

import json
from enum import Enum
from typing import IO

import httpx
from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from httpie_lite.core.config_schema import OutputSchema
from httpie_lite.core.exceptions import HeaderDecodeError
from httpie_lite.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class BodyKind(str, Enum):
    """Recognized body rendering strategies."""

    JSON = "json"
    HTML = "html"
    OTHER = "other"


def classify_content_type(value: str | None) -> BodyKind:
    """Map a Content-Type value to a rendering strategy using its MIME essence."""
    if not value:
        return BodyKind.OTHER

    essence = value.split(";", 1)[0].strip().lower()
    if essence == "application/json":
        return BodyKind.JSON
    if essence == "text/html":
        return BodyKind.HTML
    return BodyKind.OTHER


def get_content_type(response: httpx.Response) -> str | None:
    """
    Return the decoded Content-Type header, or None when absent.

    Raises:
        HeaderDecodeError: If the value holds bytes outside visible ASCII
    """
    for name, value in response.headers.raw:
        if name.lower() != b"content-type":
            continue
        if any(not (32 <= byte < 127 or byte == 9) for byte in value):
            raise HeaderDecodeError("content-type", value)
        return value.decode("ascii")
    return None


def build_console(output: OutputSchema, file: IO[str] | None = None) -> Console:
    """Create a console that only emits colour when writing to a terminal."""
    console = Console(file=file)
    if console.is_terminal:
        return Console(file=file, color_system=output.color_system)
    return console


class ResponseRenderer:
    """
    Renders an httpx.Response onto a Rich console.

    Usage:
        renderer = ResponseRenderer(build_console(config.output), config.output)
        renderer.render(response)
    """

    def __init__(self, console: Console, output: OutputSchema) -> None:
        self.console = console
        self.output = output

    def render(self, response: httpx.Response) -> None:
        """Print status line, headers and body, in that order."""
        content_type = get_content_type(response)
        self.render_status(response)
        self.render_headers(response)
        self.render_body(content_type, response.text)

    def render_status(self, response: httpx.Response) -> None:
        status = f"{response.http_version} {response.status_code} {response.reason_phrase}"
        self.console.print(Text(status.rstrip(), style="blue"), soft_wrap=True)
        self.console.print()

    def render_headers(self, response: httpx.Response) -> None:
        for name, value in response.headers.multi_items():
            self.console.print(Text.assemble((name, "green"), ": ", value), soft_wrap=True)
        self.console.print()

    def render_body(self, content_type: str | None, body: str) -> None:
        kind = classify_content_type(content_type)

        if kind is BodyKind.JSON:
            try:
                pretty = json.dumps(
                    json.loads(body),
                    indent=self.output.json_indent,
                    ensure_ascii=False,
                )
            except ValueError as e:
                log_with_source(
                    logger, "render", "warning",
                    "Body is not valid JSON, printing raw", error=str(e),
                )
                self._print_raw(body)
                return
            self._print_highlighted(pretty, "json")
        elif kind is BodyKind.HTML:
            self._print_highlighted(body, "html")
        else:
            self._print_raw(body)

    def _print_highlighted(self, code: str, lexer: str) -> None:
        if not self.console.is_terminal:
            self._print_raw(code)
            return

        syntax = Syntax(
            code,
            lexer,
            theme=self.output.theme,
            background_color="default",
            word_wrap=True,
        )
        self.console.print(syntax)

    def _print_raw(self, body: str) -> None:
        # Bypass Rich rendering, which expands tabs and drops control characters.
        self.console.file.write(body + "\n")
        self.console.file.flush()
