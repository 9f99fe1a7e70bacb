"""Copying files and directory trees, and creating destination directories."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from contextlib import contextmanager
from typing import Iterator, Optional

from .logger import Logger


def _debug(logger: Optional[Logger], message: str) -> None:
    if logger is not None:
        logger.debug(message)


@contextmanager
def _logged(logger: Optional[Logger], what: str) -> Iterator[None]:
    """Log an OSError raised in the block as ``what: error`` and re-raise it."""
    try:
        yield
    except OSError as exc:
        _debug(logger, f"{what}: {exc}")
        raise


def copy_file(
    source_path: str, destination_path: str, logger: Optional[Logger] = None
) -> None:
    """Copy a file's contents and permission bits to ``destination_path``."""
    with _logged(logger, "error opening source file"):
        source = open(source_path, "rb")
    with source:
        with _logged(logger, "error opening destination file"):
            destination = open(destination_path, "wb")
        with destination:
            with _logged(logger, "error copying file"):
                shutil.copyfileobj(source, destination)
            with _logged(logger, "error syncing destination file"):
                destination.flush()
                os.fsync(destination.fileno())

    with _logged(logger, "error getting source file info"):
        mode = stat.S_IMODE(os.stat(source_path).st_mode)
    with _logged(logger, "error setting destination file permissions"):
        os.chmod(destination_path, mode)


def copy_dir(
    source_dir: str,
    destination_dir: str,
    overwrite: bool = False,
    logger: Optional[Logger] = None,
) -> None:
    """Recursively copy ``source_dir`` to ``destination_dir``, skipping symlinks.

    Without ``overwrite`` the destination must not exist and is created with
    the source directory's permissions; with it, the destination is expected
    to exist already and existing files are replaced.
    """
    source_dir = os.path.normpath(source_dir)
    destination_dir = os.path.normpath(destination_dir)

    with _logged(logger, "error getting source directory info"):
        source_info = os.stat(source_dir)
    if not stat.S_ISDIR(source_info.st_mode):
        _debug(logger, "source is not a directory")
        raise NotADirectoryError("source is not a directory")

    try:
        os.stat(destination_dir)
        exists = True
    except FileNotFoundError:
        exists = False
    except OSError as exc:
        _debug(logger, f"error getting destination file info: {exc}")
        raise

    if not overwrite:
        if exists:
            _debug(logger, "destination already exists")
            raise FileExistsError("destination already exists")
        with _logged(logger, "error creating destination directory"):
            maybe_create_destination_dir(
                destination_dir,
                mode=stat.S_IMODE(source_info.st_mode),
                err_on_exists=True,
            )

    with _logged(logger, "error reading source directory entries"):
        with os.scandir(source_dir) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)

    for entry in entries:
        source_path = os.path.join(source_dir, entry.name)
        destination_path = os.path.join(destination_dir, entry.name)
        if entry.is_dir(follow_symlinks=False):
            copy_dir(source_path, destination_path, overwrite, logger)
        elif entry.is_symlink():
            continue
        else:
            copy_file(source_path, destination_path, logger)


def maybe_create_destination_dir(
    path: str, mode: int = 0o755, err_on_exists: bool = False
) -> None:
    """Create ``path`` and its parents if missing.

    Raises FileExistsError if the path exists and ``err_on_exists`` is true.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        os.makedirs(path, mode, exist_ok=True)
        return
    except OSError:
        return
    if err_on_exists:
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)