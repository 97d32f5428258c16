"""Regex-driven in-place editing of text files.

Main API:
    Editer(path, config)            - editing session over one file
    replace / replace_at_line       - pattern replacement, whole file or per line
    comment / comment_out           - toggle a comment marker on matching lines

Example:
    >>> import file_patcher
    >>> conf = file_patcher.EditConfig(comment="#", backup=True)
    >>> file_patcher.comment("sshd_config", conf, r"^PermitRootLogin")
"""
import logging

from . import fileio
from .core import (
    BACKUP_SUFFIX,
    ConfigurationError,
    EditConfig,
    Editer,
    LineReplacer,
    PatternError,
    Replacer,
    backup,
    exclusive_edit,
)
from .operations import (
    append,
    append_string,
    comment,
    comment_out,
    delete,
    replace,
    replace_at_line,
    replace_at_line_n,
    replace_n,
)

# Silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Editing session
    "Editer",
    "EditConfig",
    "Replacer",
    "LineReplacer",
    "exclusive_edit",
    # One-shot operations
    "append",
    "append_string",
    "delete",
    "comment",
    "comment_out",
    "replace",
    "replace_n",
    "replace_at_line",
    "replace_at_line_n",
    # Collaborators
    "backup",
    "BACKUP_SUFFIX",
    "fileio",
    # Errors
    "ConfigurationError",
    "PatternError",
]
