"""Plain byte-level file operations with optional backup."""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from .core.backup import backup as backup_file
from .core.backup import is_backup

logger = logging.getLogger(__name__)

TEMP_PREFIX = "tmp-"


def copy(
    source: Union[str, Path], dest: Union[str, Path], backup: bool = False
) -> Path:
    """Copy a file, keeping the permission bits of the source.

    Args:
        source: File to copy
        dest: Destination path
        backup: Back up an existing destination first; backup files
            themselves are never backed up

    Returns:
        Destination path
    """
    source = Path(source)
    dest = Path(dest)

    if backup and not is_backup(dest) and dest.exists():
        backup_file(dest)

    with open(source, "rb") as src, open(dest, "wb") as dst:
        shutil.copyfileobj(src, dst)
    shutil.copymode(source, dest)

    logger.info(f"File {source} copied at {dest}")
    return dest


def create(file_path: Union[str, Path], data: bytes) -> Path:
    """Create a file holding ``data``, truncating any existing one."""
    file_path = Path(file_path)
    with open(file_path, "wb") as f:
        f.write(data)

    logger.info(f"File {file_path} created")
    return file_path


def create_string(file_path: Union[str, Path], text: str, encoding: str = "utf-8") -> Path:
    return create(file_path, text.encode(encoding))


def overwrite(file_path: Union[str, Path], data: bytes, backup: bool = False) -> Path:
    """Replace the content of a file with ``data``.

    Args:
        file_path: File to overwrite
        data: New content
        backup: Back up the current file first

    Returns:
        Path of the overwritten file
    """
    file_path = Path(file_path)
    if backup:
        backup_file(file_path)

    with open(file_path, "wb") as f:
        f.write(data)

    logger.info(f"File {file_path} overwritten")
    return file_path


def overwrite_string(
    file_path: Union[str, Path], text: str, backup: bool = False, encoding: str = "utf-8"
) -> Path:
    return overwrite(file_path, text.encode(encoding), backup=backup)


def copy_to_temp(source: Union[str, Path], prefix: str = "") -> Path:
    """Copy a file into the system temporary directory.

    Args:
        source: File to copy
        prefix: Start of the temporary file name (``tmp-`` when empty)

    Returns:
        Path of the temporary copy, which the caller must remove
    """
    source = Path(source)

    with open(source, "rb") as src, tempfile.NamedTemporaryFile(
        prefix=prefix or TEMP_PREFIX, delete=False
    ) as tmp:
        try:
            shutil.copyfileobj(src, tmp)
        except OSError:
            tmp.close()
            os.remove(tmp.name)
            raise
        temp_path = Path(tmp.name)

    logger.info(f"File {source} copied at {temp_path}")
    return temp_path
