"""Backup of a file before it is edited."""
import logging
import shutil
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = "~"


def is_backup(file_path: Union[str, Path], suffix: str = BACKUP_SUFFIX) -> bool:
    """Check whether a path names a backup file."""
    return str(file_path).endswith(suffix)


def backup(file_path: Union[str, Path], suffix: str = BACKUP_SUFFIX) -> Path:
    """Copy a file to a sibling path ending with ``suffix``.

    Content, permission bits and timestamps are preserved. An existing
    backup at the same path is overwritten.

    Args:
        file_path: File to back up
        suffix: Suffix appended to the file name

    Returns:
        Path of the backup file
    """
    file_path = Path(file_path)
    backup_path = Path(f"{file_path}{suffix}")

    shutil.copy2(file_path, backup_path)
    logger.info(f"Created backup: {backup_path}")
    return backup_path
