"""Settings file support.

Default cleanup options can be stored in a TOML file so recurring
cleanups do not need every option on the command line:

    path = "/var/tmp/builds"
    max_age = "7d"
    delete_empty = true
    ignore = ['\\.keep$']
    log_dir = "/var/log/fsclean"
    quiet = true

The file lives in ~/.config/fsclean/config.toml unless another path is
given. Command-line values always take precedence.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fsclean.core.paths import get_config_path


class Settings(BaseModel):
    """Cleanup defaults read from a settings file.

    Every field is optional; unset fields fall back to command-line
    values or built-in defaults.

    Attributes:
        path: Root directory to clean.
        max_age: Maximum age to keep, in duration syntax (e.g. "7d").
        delete_empty: Remove directories left empty by the cleanup.
        ignore: Regular expressions for paths that must never be deleted.
        log_dir: Directory for dated log files.
        quiet: Suppress the startup banner.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Annotated[
        str | None,
        Field(description="Root directory to clean"),
    ] = None
    max_age: Annotated[
        str | None,
        Field(description="Maximum age to keep (e.g. 7d, 12h, 1.02:00:00)"),
    ] = None
    delete_empty: Annotated[
        bool,
        Field(description="Remove directories left empty"),
    ] = False
    ignore: Annotated[
        list[str],
        Field(description="Ignore patterns (regular expressions)"),
    ] = []
    log_dir: Annotated[
        Path | None,
        Field(description="Directory for dated log files"),
    ] = None
    quiet: Annotated[
        bool,
        Field(description="Suppress the startup banner"),
    ] = False


class ConfigError(Exception):
    """Base exception for settings file errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested settings file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when a settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load cleanup defaults from a TOML file.

    Without an explicit path the default location is used, and a
    missing default file simply yields empty settings.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or does not match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e
