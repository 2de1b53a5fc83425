"""
Argument Parsing.

Validators for the positional arguments of the get and post commands.
Both raise application errors; the Typer-facing wrappers convert them to
usage errors so the offending token shows up in the CLI message.
"""

import httpx
import typer

from httpie_lite.cli.schemas import KvPair
from httpie_lite.core.exceptions import InvalidKvPairError, InvalidUrlError


def parse_url(raw: str) -> str:
    """
    Validate that ``raw`` is a well-formed absolute URL.

    No network access is performed. Returns the input unchanged.

    Raises:
        InvalidUrlError: If the string is malformed or not absolute
    """
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise InvalidUrlError(raw, str(e)) from e

    if not url.is_absolute_url:
        raise InvalidUrlError(raw, "relative URL without a base")
    return raw


def parse_kv_pair(raw: str) -> KvPair:
    """
    Parse a ``key=value`` token, splitting on the first ``=``.

    The value may be empty (``b=``) and may itself contain ``=``.

    Raises:
        InvalidKvPairError: If the token has no ``=``
    """
    key, sep, value = raw.partition("=")
    if not sep:
        raise InvalidKvPairError(raw)
    return KvPair(key=key, value=value)


def url_param(raw: str) -> str:
    """Typer parser for URL arguments."""
    try:
        return parse_url(raw)
    except InvalidUrlError as e:
        raise typer.BadParameter(e.message) from e


def kv_pair_param(raw: str) -> KvPair:
    """Typer parser for key=value arguments."""
    try:
        return parse_kv_pair(raw)
    except InvalidKvPairError as e:
        raise typer.BadParameter(e.message) from e
