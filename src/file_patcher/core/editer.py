"""Regex-driven in-place editing of a single file."""
import logging
import os
import re
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO, NamedTuple, Optional, Union

from .backup import backup
from .errors import ConfigurationError
from .patterns import (
    LineReplacer,
    PatternLike,
    Replacer,
    TextLike,
    as_pattern_list,
    compile_all,
    compile_pattern,
    substitute,
    to_bytes,
)

logger = logging.getLogger(__name__)


class EditConfig(NamedTuple):
    """Settings for an editing session.

    Attributes:
        comment: Marker inserted by ``comment`` and removed by ``comment_out``
        backup: Back up the file before it is opened for editing
        encoding: Encoding for ``str`` patterns, replacements and data
    """
    comment: TextLike = b""
    backup: bool = False
    encoding: str = "utf-8"


class Editer:
    """Editing session over one open file.

    Every transformation reads the content from the start, builds the new
    content in memory and commits it by rewriting the file in place (seek to
    the start, write, truncate to the written length). Nothing is written
    when no pattern matches.

    The rewrite is not crash-safe: a failure in the middle of a commit can
    leave the file partially written.

    A session is not safe for concurrent use; every operation moves the
    shared file position.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        config: Optional[EditConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Open a file for editing.

        Args:
            file_path: Path to an existing file
            config: Session settings (defaults to ``EditConfig()``)
            logger: Logger for completion messages (defaults to the module logger)

        Raises:
            FileNotFoundError: If the file does not exist
            PermissionError: If the file cannot be opened for read-write
        """
        self.file_path = Path(file_path)
        self.config = config if config is not None else EditConfig()
        self.logger = logger or logging.getLogger(__name__)
        self._file: Optional[BinaryIO] = None

        if self.config.backup:
            backup(self.file_path)

        self._file = open(self.file_path, "r+b")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit.

        A close failure while another exception is propagating is logged so
        that the original exception reaches the caller.
        """
        if exc_type is None:
            self.close()
            return

        try:
            self.close()
        except Exception as e:
            self.logger.error(f"Failed to close {self.file_path}: {e}")

    @property
    def closed(self) -> bool:
        return self._file is None

    def close(self):
        """Close the file."""
        if self._file is not None:
            f, self._file = self._file, None
            f.close()

    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise RuntimeError("File not open")
        return self._file

    def _encode(self, value: TextLike) -> bytes:
        return to_bytes(value, self.config.encoding)

    def _marker(self) -> bytes:
        marker = self._encode(self.config.comment or b"")
        if not marker:
            raise ConfigurationError(
                f"No comment marker configured for {self.file_path}"
            )
        return marker

    def _read_all(self) -> bytes:
        f = self._handle()
        f.seek(0)
        return f.read()

    def _read_lines(self) -> list[bytes]:
        """Read the file split after each newline; the last line may lack one."""
        f = self._handle()
        f.seek(0)
        return list(f)

    def _rewrite(self, content: bytes) -> int:
        """Replace the whole file content with ``content``.

        Returns:
            Number of bytes written, which is also the new file size
        """
        f = self._handle()
        f.seek(0)
        written = f.write(content)
        f.truncate(written)
        f.flush()
        return written

    def append(self, data: TextLike):
        """Write data at the end of the file.

        Args:
            data: Bytes, or text encoded with the session encoding
        """
        data = self._encode(data)
        f = self._handle()
        f.seek(0, os.SEEK_END)
        f.write(data)
        f.flush()
        self.logger.info(f"Appended {len(data)} bytes to {self.file_path}")

    def delete(self, begin: int, end: int):
        """Remove the bytes in ``[begin, end)``.

        The file is rewritten even when the range is empty.

        Args:
            begin: First byte offset to remove
            end: Offset just past the last byte to remove

        Raises:
            ValueError: If the range is not inside the file
        """
        f = self._handle()
        size = os.fstat(f.fileno()).st_size
        if not 0 <= begin <= end <= size:
            raise ValueError(
                f"Range [{begin}, {end}) out of bounds for {self.file_path} ({size} bytes)"
            )

        f.seek(0)
        head = f.read(begin)
        f.seek(end)
        tail = f.read()

        self._rewrite(head + tail)
        self.logger.info(f"Deleted bytes [{begin}, {end}) from {self.file_path}")

    def comment(self, patterns: Union[PatternLike, Sequence[PatternLike]]) -> int:
        """Prefix every line matching any pattern with the comment marker.

        A line is commented once no matter how many patterns match it.

        Args:
            patterns: One line pattern or a sequence of them

        Returns:
            Number of lines commented

        Raises:
            ConfigurationError: If no comment marker is configured
            PatternError: If a pattern does not compile
        """
        prefix = self._marker() + b" "
        line_res = compile_all(as_pattern_list(patterns), self.config.encoding)

        commented = 0
        lines = []
        for line in self._read_lines():
            if any(r.search(line) for r in line_res):
                line = prefix + line
                commented += 1
            lines.append(line)

        if commented:
            self._rewrite(b"".join(lines))
            self.logger.info(f"Commented {commented} lines in {self.file_path}")
        return commented

    def comment_out(self, patterns: Union[PatternLike, Sequence[PatternLike]]) -> int:
        """Remove the comment marker from lines matching any pattern.

        Only the first marker in each matching line is removed, together with
        the spaces and tabs around it.

        Args:
            patterns: One line pattern or a sequence of them

        Returns:
            Number of markers removed

        Raises:
            ConfigurationError: If no comment marker is configured
            PatternError: If a pattern does not compile
        """
        search = rb"[ \t]*" + re.escape(self._marker()) + rb"[ \t]*"
        return self.replace_at_line_n(
            [LineReplacer(p, search, b"") for p in as_pattern_list(patterns)], 1
        )

    def replace(self, replacers: Sequence[Replacer]) -> int:
        """Replace every match of each entry across the whole content."""
        return self.replace_n(replacers, -1)

    def replace_n(self, replacers: Sequence[Replacer], n: int) -> int:
        """Replace matches across the whole content.

        Entries are applied in order, each one to the output of the previous
        one. ``n`` bounds the replacements of each entry on its own:

            n > 0: at most n matches per entry
            n == 0: nothing is read or written
            n < 0: all matches

        Returns:
            Total number of replacements made

        Raises:
            PatternError: If a search pattern does not compile
        """
        if n == 0:
            return 0

        encoding = self.config.encoding
        compiled = [
            (compile_pattern(r.search, encoding), to_bytes(r.replace, encoding))
            for r in replacers
        ]

        content = self._read_all()
        total = 0
        for search, replacement in compiled:
            content, count = substitute(search, replacement, content, n)
            total += count

        if total:
            self._rewrite(content)
            self.logger.info(f"Made {total} replacements in {self.file_path}")
        return total

    def replace_at_line(self, replacers: Sequence[LineReplacer]) -> int:
        """Replace every match of each entry inside the lines it selects."""
        return self.replace_at_line_n(replacers, -1)

    def replace_at_line_n(self, replacers: Sequence[LineReplacer], n: int) -> int:
        """Replace matches inside lines selected by each entry's line pattern.

        ``n`` is reset for every line and every entry, so an entry may make
        up to ``n`` replacements in each selected line rather than ``n`` in
        the whole file. An entry's line pattern is tested against the line as
        left by the entries before it.

            n > 0: at most n matches per entry per line
            n == 0: nothing is read or written
            n < 0: all matches

        Returns:
            Total number of replacements made

        Raises:
            PatternError: If a line or search pattern does not compile
        """
        if n == 0:
            return 0

        encoding = self.config.encoding
        compiled = [
            (
                compile_pattern(r.line, encoding),
                compile_pattern(r.search, encoding),
                to_bytes(r.replace, encoding),
            )
            for r in replacers
        ]

        total = 0
        lines = []
        for line in self._read_lines():
            for line_re, search, replacement in compiled:
                if line_re.search(line):
                    line, count = substitute(search, replacement, line, n)
                    total += count
            lines.append(line)

        if total:
            self._rewrite(b"".join(lines))
            self.logger.info(f"Made {total} line replacements in {self.file_path}")
        return total
