"""Directory tree cleanup module.

This module provides the cleanup configuration model, ignore pattern
handling, single-entry deletion operations, deletion recording, and
the bottom-up tree cleaner.
"""

from fsclean.cleaner.models import CleanupConfig, DeletionResult, EntryKind
from fsclean.cleaner.operator import delete_directory, delete_file
from fsclean.cleaner.patterns import PatternError, compile_patterns, is_ignored
from fsclean.cleaner.recorder import DeletionRecorder, LoggingRecorder
from fsclean.cleaner.tree import TreeCleaner, is_age_eligible

__all__ = [
    "CleanupConfig",
    "DeletionRecorder",
    "DeletionResult",
    "EntryKind",
    "LoggingRecorder",
    "PatternError",
    "TreeCleaner",
    "compile_patterns",
    "delete_directory",
    "delete_file",
    "is_age_eligible",
    "is_ignored",
]
