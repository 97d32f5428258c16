"""Replacement entries and limited regex substitution over bytes."""
import re
from collections.abc import Iterable
from re import Pattern
from typing import NamedTuple, Union

from .errors import PatternError

PatternLike = Union[str, bytes, Pattern]
TextLike = Union[str, bytes]


class Replacer(NamedTuple):
    """Text to replace across the whole file content."""
    search: PatternLike
    replace: TextLike


class LineReplacer(NamedTuple):
    """Text to replace only inside lines matched by ``line``."""
    line: PatternLike
    search: PatternLike
    replace: TextLike


def to_bytes(value: TextLike, encoding: str = "utf-8") -> bytes:
    """Encode ``str`` values, pass ``bytes`` through."""
    if isinstance(value, str):
        return value.encode(encoding)
    return bytes(value)


def compile_pattern(pattern: PatternLike, encoding: str = "utf-8") -> Pattern:
    """Compile a pattern for matching against file bytes.

    Args:
        pattern: Regex source as ``str``/``bytes`` or an already compiled pattern
        encoding: Encoding used for ``str`` sources

    Returns:
        Compiled bytes pattern

    Raises:
        PatternError: If the pattern does not compile
    """
    if isinstance(pattern, Pattern):
        if isinstance(pattern.pattern, bytes):
            return pattern
        flags = pattern.flags & ~re.UNICODE
        pattern = pattern.pattern.encode(encoding)
    else:
        flags = 0
        pattern = to_bytes(pattern, encoding)

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(pattern, e) from e


def as_pattern_list(patterns: Union[PatternLike, Iterable[PatternLike]]) -> list[PatternLike]:
    """Wrap a single pattern in a list; copy a collection of patterns."""
    if isinstance(patterns, (str, bytes, Pattern)):
        return [patterns]
    return list(patterns)


def compile_all(patterns: Iterable[PatternLike], encoding: str = "utf-8") -> list[Pattern]:
    """Compile every pattern up front so a bad one fails before any read."""
    return [compile_pattern(p, encoding) for p in patterns]


def substitute(pattern: Pattern, replacement: bytes, data: bytes, limit: int) -> tuple[bytes, int]:
    """Replace up to ``limit`` matches of ``pattern`` in ``data``, left to right.

    The replacement is inserted literally; group references are not expanded.
    A negative limit replaces every match. An empty match right after the
    previous match is skipped and does not count against the limit.

    Returns:
        Tuple of (new data, number of replacements)
    """
    if limit == 0:
        return data, 0

    parts = []
    count = 0
    pos = 0
    last_end = -1
    for match in pattern.finditer(data):
        start, end = match.span()
        if start == end == last_end:
            continue
        if count == limit:
            break

        parts.append(data[pos:start])
        parts.append(replacement)
        pos = last_end = end
        count += 1

    parts.append(data[pos:])
    return b"".join(parts), count
