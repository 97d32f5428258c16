"""One-shot edits: open a session, run one operation, close it.

If the operation fails, its exception is raised even when closing the
file fails as well.
"""
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

from .core.editer import EditConfig, Editer
from .core.patterns import LineReplacer, PatternLike, Replacer

PathLike = Union[str, Path]
Patterns = Union[PatternLike, Sequence[PatternLike]]


def append(file_path: PathLike, data: bytes, backup: bool = False):
    """Write ``data`` at the end of a file."""
    with Editer(file_path, EditConfig(backup=backup)) as editer:
        editer.append(data)


def append_string(
    file_path: PathLike, text: str, backup: bool = False, encoding: str = "utf-8"
):
    with Editer(file_path, EditConfig(backup=backup, encoding=encoding)) as editer:
        editer.append(text)


def delete(file_path: PathLike, begin: int, end: int, config: Optional[EditConfig] = None):
    """Remove the bytes in ``[begin, end)`` from a file."""
    with Editer(file_path, config) as editer:
        editer.delete(begin, end)


def comment(file_path: PathLike, config: EditConfig, patterns: Patterns) -> int:
    """Comment the lines of a file that match one or more patterns.

    Returns:
        Number of lines commented
    """
    with Editer(file_path, config) as editer:
        return editer.comment(patterns)


def comment_out(file_path: PathLike, config: EditConfig, patterns: Patterns) -> int:
    """Uncomment the lines of a file that match one or more patterns.

    Returns:
        Number of markers removed
    """
    with Editer(file_path, config) as editer:
        return editer.comment_out(patterns)


def replace(
    file_path: PathLike, config: Optional[EditConfig], replacers: Sequence[Replacer]
) -> int:
    with Editer(file_path, config) as editer:
        return editer.replace(replacers)


def replace_n(
    file_path: PathLike,
    config: Optional[EditConfig],
    replacers: Sequence[Replacer],
    n: int,
) -> int:
    with Editer(file_path, config) as editer:
        return editer.replace_n(replacers, n)


def replace_at_line(
    file_path: PathLike, config: Optional[EditConfig], replacers: Sequence[LineReplacer]
) -> int:
    with Editer(file_path, config) as editer:
        return editer.replace_at_line(replacers)


def replace_at_line_n(
    file_path: PathLike,
    config: Optional[EditConfig],
    replacers: Sequence[LineReplacer],
    n: int,
) -> int:
    with Editer(file_path, config) as editer:
        return editer.replace_at_line_n(replacers, n)
