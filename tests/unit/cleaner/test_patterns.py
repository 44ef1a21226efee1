"""Unit tests for ignore pattern compilation and matching."""

import pytest
from fsclean.cleaner.patterns import PatternError, compile_patterns, is_ignored


class TestCompilePatterns:
    """Tests for compile_patterns function."""

    def test_preserves_order(self) -> None:
        """Patterns are compiled in the order given."""
        patterns = compile_patterns([r"\.keep$", "/cache/"])

        assert [p.pattern for p in patterns] == [r"\.keep$", "/cache/"]

    def test_empty_input(self) -> None:
        """No sources yields an empty tuple."""
        assert compile_patterns([]) == ()

    def test_invalid_pattern_raises(self) -> None:
        """A broken regex raises PatternError naming the pattern."""
        with pytest.raises(PatternError, match=r"\(unclosed"):
            compile_patterns(["ok", "(unclosed"])

    def test_pattern_error_is_value_error(self) -> None:
        """PatternError can be handled as a ValueError."""
        assert issubclass(PatternError, ValueError)


class TestIsIgnored:
    """Tests for is_ignored function."""

    def test_no_patterns_never_ignores(self) -> None:
        """An empty pattern set ignores nothing."""
        assert is_ignored("/data/old/file.tmp", ()) is False

    def test_suffix_match(self) -> None:
        """An anchored suffix pattern matches only that suffix."""
        patterns = compile_patterns([r"\.keep$"])

        assert is_ignored("/data/old/data.keep", patterns) is True
        assert is_ignored("/data/old/data.tmp", patterns) is False

    def test_search_is_unanchored(self) -> None:
        """Patterns match anywhere in the path, not just at the start."""
        patterns = compile_patterns(["cache"])

        assert is_ignored("/srv/app/cache/entry.bin", patterns) is True

    def test_any_pattern_matches(self) -> None:
        """A match by any one pattern is enough."""
        patterns = compile_patterns(["nomatch", r"\.log$"])

        assert is_ignored("/var/tmp/run.log", patterns) is True

    def test_matching_is_case_sensitive(self) -> None:
        """Patterns follow normal regex case sensitivity."""
        patterns = compile_patterns([r"\.KEEP$"])

        assert is_ignored("/data/file.keep", patterns) is False
