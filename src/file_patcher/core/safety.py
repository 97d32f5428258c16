"""Exclusive access to a file for the length of an editing session."""
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock

from .editer import EditConfig, Editer


def lock_path_for(file_path: Union[str, Path]) -> Path:
    """Path of the lock file guarding ``file_path``."""
    return Path(f"{file_path}.lock")


@contextmanager
def exclusive_edit(
    file_path: Union[str, Path],
    config: Optional[EditConfig] = None,
    timeout: float = 30,
    logger: Optional[logging.Logger] = None,
) -> Iterator[Editer]:
    """Open an editing session while holding a lock on the file.

    Editer itself does no locking. Processes that edit the same file
    through this context manager are serialised on ``<file>.lock``.

    Args:
        file_path: Path to the file to edit
        config: Session settings
        timeout: Seconds to wait for the lock (negative waits forever)
        logger: Logger passed on to the session

    Yields:
        Open Editer, closed on exit

    Raises:
        filelock.Timeout: If the lock is not acquired in time
    """
    log = logger or logging.getLogger(__name__)
    lock = FileLock(lock_path_for(file_path), timeout=timeout)

    lock.acquire()
    log.info(f"Acquired lock for {file_path}")
    try:
        with Editer(file_path, config, logger) as editer:
            yield editer
    finally:
        lock.release()
        log.info(f"Released lock for {file_path}")
