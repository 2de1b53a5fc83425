"""
Configuration Management.

Loads the built-in defaults from httpie_lite/settings/*.yaml. There are no
user config files and no environment variables; the YAML files ship with
the package.

Settings (YAML):
    client.yaml   - Default request headers, timeout, output theme
    logging.yaml  - Logging level and format
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from httpie_lite.core.config_schema import (
    ClientSchema,
    LoggingSchema,
    OutputSchema,
    SettingsSchema,
)
from httpie_lite.core.exceptions import ConfigurationError

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "settings"


def load_yaml_config(filename: str, settings_dir: Path | None = None) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = (settings_dir or SETTINGS_DIR) / filename

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in {filename}: {e}") from e


def _load_validated(schema_cls: type, filename: str, settings_dir: Path | None) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename, settings_dir)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from the bundled YAML files.

    Each file is validated against its Pydantic schema at load time.
    Properties return frozen Pydantic model instances.
    """

    def __init__(self, settings_dir: Path | None = None) -> None:
        settings = _load_validated(SettingsSchema, "client.yaml", settings_dir)
        self._client = settings.client
        self._output = settings.output
        self._logging = _load_validated(LoggingSchema, "logging.yaml", settings_dir)

    @property
    def client(self) -> ClientSchema:
        """HTTP client settings."""
        return self._client

    @property
    def output(self) -> OutputSchema:
        """Response rendering settings."""
        return self._output

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()
