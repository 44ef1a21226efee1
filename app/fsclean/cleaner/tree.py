"""Recursive cleanup of a directory tree.

The walk is bottom-up: every subdirectory is fully processed before
its parent's files are aged and before the parent is checked for
emptiness. A directory emptied by the cleanup can therefore cascade
into the removal of its ancestors within a single run.
"""

import logging
import os
import time
from collections.abc import Callable
from datetime import timedelta

from fsclean.cleaner.models import CleanupConfig
from fsclean.cleaner.operator import delete_directory, delete_file
from fsclean.cleaner.patterns import is_ignored
from fsclean.cleaner.recorder import DeletionRecorder, LoggingRecorder

logger = logging.getLogger(__name__)


def is_age_eligible(mtime: float, max_age: timedelta, now: float) -> bool:
    """Check if a file is old enough to delete.

    A file is eligible only when ``mtime + max_age`` lies strictly
    before ``now``; a file exactly ``max_age`` old is kept.

    Args:
        mtime: Last modification time as a POSIX timestamp.
        max_age: Maximum age to keep.
        now: Current time as a POSIX timestamp.

    Returns:
        True if the file exceeds the maximum age.
    """
    return mtime + max_age.total_seconds() < now


class TreeCleaner:
    """Deletes aged files and, optionally, emptied directories.

    Symbolic links to directories are never followed, so link loops
    cannot make the walk revisit a directory. Failures on individual
    entries are recorded and the walk carries on.

    Args:
        config: Settings for this run.
        recorder: Receives every deletion attempt. Defaults to a
            LoggingRecorder.
        clock: Returns the current POSIX time; read once per file.
    """

    def __init__(
        self,
        config: CleanupConfig,
        recorder: DeletionRecorder | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._recorder = recorder or LoggingRecorder()
        self._clock = clock

    def run(self) -> None:
        """Clean the configured tree.

        Unreadable directories are logged and skipped together with
        their subtree. No per-entry error escapes this method.
        """
        root = str(self._config.root)
        logger.debug("Cleaning %s (max age %s)", root, self._config.max_age)

        for dirpath, _dirnames, filenames in os.walk(
            root, topdown=False, onerror=self._on_walk_error
        ):
            self._clean_files(dirpath, filenames)

            if self._config.delete_empty:
                self._remove_if_empty(dirpath)

    def _clean_files(self, dirpath: str, filenames: list[str]) -> None:
        """Delete the aged, non-ignored files of one directory.

        Args:
            dirpath: Directory containing the files.
            filenames: Names of the non-directory entries in dirpath.
        """
        for name in filenames:
            path = os.path.join(dirpath, name)

            try:
                mtime = os.lstat(path).st_mtime
            except OSError as e:
                logger.warning("Cannot read modification time of %s: %s", path, e)
                continue

            if not is_age_eligible(mtime, self._config.max_age, self._clock()):
                continue

            if is_ignored(path, self._config.ignore):
                continue

            self._recorder.record(delete_file(path))

    def _remove_if_empty(self, dirpath: str) -> None:
        """Delete a directory if a fresh listing finds it empty.

        Args:
            dirpath: Directory whose contents have already been cleaned.
        """
        try:
            with os.scandir(dirpath) as entries:
                has_entries = next(entries, None) is not None
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", dirpath, e)
            return

        if has_entries:
            return

        if is_ignored(dirpath, self._config.ignore):
            return

        self._recorder.record(delete_directory(dirpath))

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        """Log a directory that could not be enumerated."""
        logger.warning("Cannot list directory %s: %s", error.filename, error)
