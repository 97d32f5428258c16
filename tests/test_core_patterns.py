"""Tests for pattern compilation and limited substitution."""
import re

import pytest
from file_patcher.core.errors import PatternError
from file_patcher.core.patterns import (
    LineReplacer,
    Replacer,
    as_pattern_list,
    compile_all,
    compile_pattern,
    substitute,
    to_bytes,
)
from hypothesis import given
from hypothesis import strategies as st


class TestCompilePattern:
    """Test pattern normalisation."""

    def test_str_pattern(self) -> None:
        """Test that text patterns compile to bytes patterns."""
        pattern = compile_pattern(r"^\w+")
        assert isinstance(pattern.pattern, bytes)
        assert pattern.search(b"word")

    def test_bytes_pattern(self) -> None:
        """Test bytes patterns."""
        assert compile_pattern(rb"a+").pattern == rb"a+"

    def test_compiled_bytes_pattern_passes_through(self) -> None:
        """Test that a compiled bytes pattern is reused."""
        compiled = re.compile(rb"x", re.MULTILINE)
        assert compile_pattern(compiled) is compiled

    def test_compiled_str_pattern_keeps_flags(self) -> None:
        """Test recompiling a text pattern keeps its flags."""
        pattern = compile_pattern(re.compile("abc", re.IGNORECASE))
        assert pattern.flags & re.IGNORECASE
        assert pattern.search(b"xABCx")

    def test_non_ascii_pattern(self) -> None:
        """Test text patterns are encoded with the given encoding."""
        pattern = compile_pattern("café", encoding="latin-1")
        assert pattern.search("café".encode("latin-1"))

    def test_invalid_pattern(self) -> None:
        """Test compile failures."""
        with pytest.raises(PatternError) as exc_info:
            compile_pattern("a(b")

        assert exc_info.value.pattern == b"a(b"
        assert isinstance(exc_info.value.reason, re.error)
        assert isinstance(exc_info.value, ValueError)

    def test_compile_all_stops_on_first_error(self) -> None:
        """Test that compile_all fails on any bad pattern."""
        with pytest.raises(PatternError):
            compile_all(["ok", "[bad", "fine"])


class TestSubstitute:
    """Test limited substitution."""

    def test_unlimited(self) -> None:
        """Test that a negative limit replaces all matches."""
        assert substitute(re.compile(b"o"), b"0", b"foo boo", -1) == (b"f00 b00", 4)

    def test_limited(self) -> None:
        """Test that matches are replaced left to right up to the limit."""
        assert substitute(re.compile(b"o"), b"0", b"foo boo", 3) == (b"f00 b0o", 3)

    def test_zero_limit(self) -> None:
        """Test that a zero limit replaces nothing."""
        assert substitute(re.compile(b"o"), b"0", b"foo", 0) == (b"foo", 0)

    def test_empty_match_after_match_skipped(self) -> None:
        """Test that an empty match adjacent to the previous match is skipped."""
        pattern = re.compile(b"x*")
        assert substitute(pattern, b"-", b"xxa", -1) == (b"-a-", 2)
        assert substitute(pattern, b"-", b"axxb", -1) == (b"-a-b-", 3)

    def test_empty_match_does_not_use_limit(self) -> None:
        """Test that skipped empty matches leave the limit alone."""
        pattern = re.compile(b"x*")
        assert substitute(pattern, b"-", b"xxa", 1) == (b"-a", 1)
        assert substitute(pattern, b"-", b"xxa", 2) == (b"-a-", 2)

    def test_literal_replacement(self) -> None:
        """Test that backslashes in the replacement are kept."""
        assert substitute(re.compile(b"x"), rb"\g<0>\n", b"x", -1) == (rb"\g<0>\n", 1)

    @given(
        data=st.binary(max_size=100),
        limit=st.integers(min_value=1, max_value=10),
    )
    def test_property_based_limit(self, data: bytes, limit: int) -> None:
        """Property-based testing of the replacement count."""
        _, count = substitute(re.compile(b"a"), b"b", data, limit)
        assert count == min(limit, data.count(b"a"))


class TestEntries:
    """Test replacement entries."""

    def test_replacer_fields(self) -> None:
        """Test field access by name and position."""
        entry = Replacer("dolor", "DOL_")
        assert entry.search == "dolor"
        assert entry[1] == "DOL_"

    def test_line_replacer_fields(self) -> None:
        """Test line-scoped entries."""
        line, search, replace = LineReplacer("heard", "a", "AA")
        assert (line, search, replace) == ("heard", "a", "AA")

    def test_as_pattern_list(self) -> None:
        """Test that a single pattern is not split into characters."""
        compiled = re.compile(b"x")
        assert as_pattern_list("night") == ["night"]
        assert as_pattern_list(b"night") == [b"night"]
        assert as_pattern_list(compiled) == [compiled]
        assert as_pattern_list(("a", "b")) == ["a", "b"]

    def test_to_bytes(self) -> None:
        """Test text encoding."""
        assert to_bytes("abc") == b"abc"
        assert to_bytes(b"abc") == b"abc"
        assert to_bytes("é", "utf-8") == b"\xc3\xa9"
