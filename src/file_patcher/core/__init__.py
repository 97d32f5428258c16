"""Core file editing modules."""

from .backup import BACKUP_SUFFIX, backup, is_backup
from .editer import EditConfig, Editer
from .errors import ConfigurationError, PatternError
from .patterns import LineReplacer, Replacer, compile_pattern
from .safety import exclusive_edit, lock_path_for

__all__ = [
    # Editing session
    'Editer',
    'EditConfig',
    'Replacer',
    'LineReplacer',
    'compile_pattern',

    # Errors
    'ConfigurationError',
    'PatternError',

    # Safety mechanisms
    'backup',
    'is_backup',
    'BACKUP_SUFFIX',
    'exclusive_edit',
    'lock_path_for',
]
