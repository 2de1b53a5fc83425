"""
CLI Commands.

One module per request method family.
"""

from httpie_lite.cli.commands.request import get, post

__all__ = [
    "get",
    "post",
]
