"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import time
from collections.abc import Callable
from pathlib import Path

import pytest
from fsclean.cleaner.models import DeletionResult
from fsclean.cleaner.recorder import DeletionRecorder

# Ten days, comfortably older than the one-day thresholds used in tests
OLD_AGE_SECONDS = 10 * 24 * 60 * 60


class ListRecorder(DeletionRecorder):
    """Collects deletion results in memory for assertions."""

    def __init__(self) -> None:
        self.results: list[DeletionResult] = []

    def record(self, result: DeletionResult) -> None:
        self.results.append(result)

    @property
    def paths(self) -> list[str]:
        return [r.path for r in self.results]


@pytest.fixture
def recorder() -> ListRecorder:
    """Fresh in-memory recorder."""
    return ListRecorder()


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory creating a file with a given age in seconds."""

    def _make(path: Path, age_seconds: float = 0, content: str = "data") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        mtime = time.time() - age_seconds
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def make_old_file(make_file: Callable[..., Path]) -> Callable[[Path], Path]:
    """Factory creating a file ten days old."""

    def _make(path: Path) -> Path:
        return make_file(path, OLD_AGE_SECONDS)

    return _make
