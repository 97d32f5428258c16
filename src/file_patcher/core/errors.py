"""Error types raised before an edit touches the file."""
from typing import Union


class ConfigurationError(ValueError):
    """Raised when an operation needs configuration the session lacks."""


class PatternError(ValueError):
    """Raised when a search or line pattern fails to compile."""

    def __init__(self, pattern: Union[str, bytes], reason: Exception):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
