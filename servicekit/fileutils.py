"""File and directory helpers."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator


def copy_file(source: str, target: str) -> None:
    """Copy the contents of ``source`` to ``target``, creating or truncating it."""
    shutil.copyfile(source, target)


def file_exists(path: str) -> bool:
    """Return True if anything exists at ``path``."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def dir_exists(path: str) -> bool:
    """Return True if ``path`` exists and is a directory."""
    try:
        return os.path.isdir(path)
    except ValueError:
        return False


def create_file(path: str) -> None:
    """Create an empty file, truncating any existing one."""
    with open(path, "w", encoding="utf-8"):
        pass


def mkdir_all(path: str) -> bool:
    """Create ``path`` and all missing parents; return whether it succeeded."""
    try:
        os.makedirs(path, exist_ok=True)
    except (OSError, ValueError):
        return False
    return True


def _walk(directory: str) -> Iterator[os.DirEntry]:
    """Yield entries depth first, in lexical order, without following links."""
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)
        else:
            yield entry


def find_by_file_name(directory: str, filename: str) -> list[str]:
    """Return base names of files under ``directory`` whose name contains ``filename``.

    The walk stops at the first error; names found up to then are returned.
    """
    found: list[str] = []
    try:
        for entry in _walk(directory):
            if filename in entry.name:
                found.append(entry.name)
    except OSError:
        pass
    return found


def move_file(src: str, dst: str) -> None:
    """Copy ``src`` to ``dst`` and then remove ``src``."""
    copy_file(src, dst)
    os.remove(src)