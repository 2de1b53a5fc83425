"""
Configuration Schemas.

Pydantic models defining the expected structure of each bundled YAML file.
Used by AppConfig to validate configuration at load time. Missing keys,
wrong types or unknown fields raise a clear error at startup instead of a
cryptic KeyError deep in the request path.

Each top-level class corresponds to one file in httpie_lite/settings/:
    SettingsSchema  → client.yaml
    LoggingSchema   → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from httpie_lite import __version__

DEFAULT_USER_AGENT = f"httpie-lite/{__version__}"


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# client.yaml
# =============================================================================


class ClientSchema(_StrictBase):
    """Immutable HTTP client configuration handed to the client builder."""

    headers: dict[str, str] = Field(default_factory=dict, validate_default=True)
    timeout: float | None = None
    follow_redirects: bool = False

    @field_validator("headers")
    @classmethod
    def _default_user_agent(cls, headers: dict[str, str]) -> dict[str, str]:
        if any(name.lower() == "user-agent" for name in headers):
            return headers
        return {**headers, "User-Agent": DEFAULT_USER_AGENT}


class OutputSchema(_StrictBase):
    theme: str = "monokai"
    color_system: Literal["auto", "standard", "256", "truecolor", "windows"] = "truecolor"
    json_indent: int = Field(default=2, ge=0)


class SettingsSchema(_StrictBase):
    client: ClientSchema
    output: OutputSchema


# =============================================================================
# logging.yaml
# =============================================================================


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["console", "json"]
