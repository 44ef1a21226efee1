"""Reporting of deletion attempts.

The tree cleaner hands every DeletionResult to a recorder instead of
writing to a global log sink, so callers decide where outcomes go.
"""

import logging
from abc import ABC, abstractmethod

from fsclean.cleaner.models import DeletionResult

logger = logging.getLogger(__name__)


class DeletionRecorder(ABC):
    """Abstract base class for deletion outcome sinks.

    Example:
        >>> class ListRecorder(DeletionRecorder):
        ...     def __init__(self):
        ...         self.results = []
        ...     def record(self, result):
        ...         self.results.append(result)
    """

    @abstractmethod
    def record(self, result: DeletionResult) -> None:
        """Receive the outcome of one deletion attempt.

        Args:
            result: Outcome of the attempt, successful or not.
        """


class LoggingRecorder(DeletionRecorder):
    """Writes one log line per deletion attempt.

    Successes are logged at INFO, failures at WARNING together with
    the error message. Attempts that had to clear a read-only
    attribute first are marked as such.
    """

    def record(self, result: DeletionResult) -> None:
        note = " (read-only cleared)" if result.retried else ""
        if result.failed:
            logger.warning("Deleting %s... failed%s: %s", result.path, note, result.error)
        else:
            logger.info("Deleting %s... succeeded%s.", result.path, note)
