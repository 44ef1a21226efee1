"""XDG-compliant path management for fsclean.

This module provides the locations fsclean reads its optional
configuration from and the naming of dated log files.

XDG defaults:
- Config: ~/.config/fsclean/
"""

import os
from datetime import datetime
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fsclean"

# Log files are named after the day they were written (e.g. 261018.log)
LOG_FILE_FORMAT = "%y%m%d.log"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fsclean/ (or XDG_CONFIG_HOME/fsclean/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/fsclean/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_log_path(log_dir: Path, now: datetime | None = None) -> Path:
    """Get the dated log file path inside a log directory.

    Args:
        log_dir: Directory that holds the log files.
        now: Timestamp to derive the file name from. Defaults to the
            current local time.

    Returns:
        Path such as ``<log_dir>/261018.log``.
    """
    stamp = now or datetime.now()
    return log_dir / stamp.strftime(LOG_FILE_FORMAT)
