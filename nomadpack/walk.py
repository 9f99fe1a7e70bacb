"""Directory walking that follows symbolic links to directories."""

from __future__ import annotations

import os
import stat
from typing import Callable, Optional

WalkFn = Callable[[str, Optional[os.stat_result], Optional[OSError]], None]


class SkipDir(Exception):
    """Raised by a walk function to skip the directory it was called for.

    Raised for a file, it skips the remaining entries of that file's directory.
    """


def _is_symlink(info: os.stat_result) -> bool:
    return stat.S_ISLNK(info.st_mode)


def _is_dir(info: os.stat_result) -> bool:
    return stat.S_ISDIR(info.st_mode)


def walk(root: str, walk_fn: WalkFn) -> None:
    """Walk the tree at ``root`` in lexical order, calling ``walk_fn(path, info, error)``.

    ``info`` is the lstat result (the target's, for symlinks) and ``error`` is
    the OSError met while examining the path, if any. Exceptions other than
    SkipDir raised by ``walk_fn`` stop the walk and propagate.
    """
    try:
        info = os.lstat(root)
    except OSError as exc:
        try:
            walk_fn(root, None, exc)
        except SkipDir:
            pass
        return
    try:
        _symwalk(root, info, walk_fn)
    except SkipDir:
        pass


def _symwalk(path: str, info: os.stat_result, walk_fn: WalkFn) -> None:
    if _is_symlink(info):
        try:
            resolved = os.path.realpath(path, strict=True)
        except OSError as exc:
            raise OSError(f"error evaluating symlink: {exc}") from exc
        target_info = os.lstat(resolved)
        try:
            _symwalk(path, target_info, walk_fn)
        except SkipDir:
            pass
        return

    walk_fn(path, info, None)

    if not _is_dir(info):
        return

    try:
        names = read_dir_names(path)
    except OSError as exc:
        walk_fn(path, info, exc)
        return

    for name in names:
        filename = os.path.join(path, name)
        try:
            file_info = os.lstat(filename)
        except OSError as exc:
            try:
                walk_fn(filename, None, exc)
            except SkipDir:
                pass
            continue
        try:
            _symwalk(filename, file_info, walk_fn)
        except SkipDir:
            if not _is_dir(file_info) and not _is_symlink(file_info):
                raise


def read_dir_names(dirname: str) -> list[str]:
    """Return the names in ``dirname``, sorted."""
    return sorted(os.listdir(dirname))