"""Single-entry deletion operations.

Each function removes exactly one filesystem entry and reports the
outcome as a DeletionResult instead of raising, so one failure never
interrupts the rest of a cleanup.
"""

import logging
import os
import stat

from fsclean.cleaner.models import DeletionResult, EntryKind

logger = logging.getLogger(__name__)


def delete_file(path: str) -> DeletionResult:
    """Delete a file, clearing a read-only attribute if that blocks it.

    The first failed unlink is retried exactly once, and only when the
    file turns out to be read-only. Any other cause is reported as a
    failure straight away.

    Args:
        path: Absolute path of the file (or symbolic link) to delete.

    Returns:
        DeletionResult indicating success or failure.
    """
    try:
        os.unlink(path)
        return DeletionResult(path=path, kind=EntryKind.FILE, success=True)
    except OSError as first_error:
        if not _is_read_only(path):
            return DeletionResult(
                path=path,
                kind=EntryKind.FILE,
                success=False,
                error=str(first_error),
            )

    logger.debug("Clearing read-only attribute on %s", path)
    try:
        mode = os.lstat(path).st_mode
        os.chmod(path, stat.S_IMODE(mode) | stat.S_IWRITE)
        os.unlink(path)
    except OSError as e:
        return DeletionResult(
            path=path,
            kind=EntryKind.FILE,
            success=False,
            error=str(e),
            retried=True,
        )

    return DeletionResult(path=path, kind=EntryKind.FILE, success=True, retried=True)


def delete_directory(path: str) -> DeletionResult:
    """Delete an empty directory.

    Only empty directories are ever targeted, so a single ``rmdir``
    attempt is made with no retry.

    Args:
        path: Absolute path of the directory to delete.

    Returns:
        DeletionResult indicating success or failure.
    """
    try:
        os.rmdir(path)
    except OSError as e:
        return DeletionResult(
            path=path,
            kind=EntryKind.DIRECTORY,
            success=False,
            error=str(e),
        )

    return DeletionResult(path=path, kind=EntryKind.DIRECTORY, success=True)


def _is_read_only(path: str) -> bool:
    """Check if a regular file lacks the owner-write permission.

    Symbolic links are never treated as read-only since changing their
    mode would affect the link target.
    """
    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode) and not mode & stat.S_IWRITE
