"""Ignore patterns that exclude paths from cleanup.

Patterns are regular expressions searched (not anchored) in the full
path string, so ``\\.keep$`` protects every ``*.keep`` file and
``/cache/`` protects a whole subtree.
"""

import re
from collections.abc import Iterable, Sequence


class PatternError(ValueError):
    """Raised when an ignore pattern is not a valid regular expression."""


def compile_patterns(sources: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    """Compile ignore patterns, preserving their order.

    Args:
        sources: Regular expression strings.

    Returns:
        Tuple of compiled patterns.

    Raises:
        PatternError: If any pattern fails to compile.
    """
    compiled: list[re.Pattern[str]] = []
    for source in sources:
        try:
            compiled.append(re.compile(source))
        except re.error as e:
            msg = f"Invalid ignore pattern '{source}': {e}"
            raise PatternError(msg) from e
    return tuple(compiled)


def is_ignored(path: str, patterns: Sequence[re.Pattern[str]]) -> bool:
    """Check if a path matches any ignore pattern.

    Args:
        path: Absolute path of a file or directory.
        patterns: Compiled ignore patterns, checked in order.

    Returns:
        True if at least one pattern matches anywhere in the path.
    """
    return any(pattern.search(path) for pattern in patterns)
