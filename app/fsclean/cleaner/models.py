"""Cleanup domain models.

This module defines the immutable configuration a cleanup run is
driven by and the result value reported for every deletion attempt.
"""

import os
import re
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from fsclean.core.duration import is_valid_duration


class EntryKind(str, Enum):
    """Type of entry a deletion was attempted on.

    Attributes:
        FILE: Regular file, or a symbolic link to one.
        DIRECTORY: Empty directory.
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of a single deletion attempt.

    Attributes:
        path: Absolute path that was operated on.
        kind: Whether a file or a directory was targeted.
        success: Whether the entry was removed.
        error: Error message if the deletion failed, None otherwise.
        retried: Whether a read-only attribute had to be cleared first.
    """

    path: str
    kind: EntryKind
    success: bool
    error: str | None = None
    retried: bool = False

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.success


class CleanupConfig(BaseModel):
    """Immutable settings for one cleanup run.

    Built once before traversal starts and shared read-only by every
    level of the walk.

    Attributes:
        root: Existing directory to clean. Stored as an absolute path.
        max_age: Files survive while ``now - mtime <= max_age``.
        delete_empty: Remove directories left empty after file cleanup.
        ignore: Compiled patterns; a path matching any of them is kept.
        quiet: Suppress the startup banner.
    """

    model_config = ConfigDict(frozen=True)

    root: Path
    max_age: timedelta
    delete_empty: bool = False
    ignore: tuple[re.Pattern[str], ...] = ()
    quiet: bool = False

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: Path) -> Path:
        """Require an existing directory and make the path absolute."""
        if not v.is_dir():
            msg = f"Path is not an existing directory: {v}"
            raise ValueError(msg)
        return Path(os.path.abspath(v))

    @field_validator("max_age")
    @classmethod
    def validate_max_age(cls, v: timedelta) -> timedelta:
        """Reject the invalid-duration sentinel and negative ages."""
        if not is_valid_duration(v):
            msg = "Maximum age is not a valid duration"
            raise ValueError(msg)
        if v < timedelta(0):
            msg = f"Maximum age cannot be negative, got {v}"
            raise ValueError(msg)
        return v
