"""
Command Schemas.

Immutable models for the parsed command line.
"""

from pydantic import BaseModel, ConfigDict, Field


class KvPair(BaseModel):
    """A parsed ``key=value`` token contributing one field to a POST body."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class GetCommand(BaseModel):
    """HTTP GET request."""

    model_config = ConfigDict(frozen=True)

    url: str


class PostCommand(BaseModel):
    """HTTP POST request with a JSON body built from key=value pairs."""

    model_config = ConfigDict(frozen=True)

    url: str
    body: tuple[KvPair, ...] = Field(default_factory=tuple)


Command = GetCommand | PostCommand
