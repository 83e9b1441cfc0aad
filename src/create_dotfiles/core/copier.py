"""Copying of single entries.

A directory source is copied recursively, merging into whatever already exists
at the destination. A file source is copied after its parent directories are
created. Nothing is rolled back if a copy fails halfway through a tree.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import SourceNotFoundError
from .report import CopyOutcome

logger = logging.getLogger(__name__)


def copy_path(src: Path, dest: Path) -> None:
    """Copy a file or directory from ``src`` to ``dest``.

    Existing files at the destination are overwritten. Symlinks are followed
    when deciding between a file and a directory copy.

    Args:
        src (Path): Existing source file or directory.
        dest (Path): Destination path.

    Raises:
        SourceNotFoundError: If ``src`` does not exist.
        IsADirectoryError: If ``src`` is a file and ``dest`` is an existing
            directory.
        OSError: If the copy itself fails (permissions, disk space, ...).
    """
    try:
        stat_src = src.stat()
    except FileNotFoundError as e:
        raise SourceNotFoundError(str(e)) from e

    if src.is_dir():
        logger.debug("Copying directory %s -> %s", src, dest)
        shutil.copytree(src, dest, dirs_exist_ok=True)
    else:
        logger.debug("Copying file %s -> %s (%d bytes)", src, dest, stat_src.st_size)
        if dest.is_dir():
            raise IsADirectoryError(f"destination is a directory: {dest}")
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)


def attempt_copy(src: Path, dest: Path) -> CopyOutcome:
    """Copy ``src`` to ``dest`` and report the outcome instead of raising."""
    try:
        copy_path(src, dest)
    except SourceNotFoundError as e:
        return CopyOutcome.failed(str(e))
    except OSError as e:
        logger.debug("Copy of %s failed", src, exc_info=True)
        return CopyOutcome.failed(str(e))
    return CopyOutcome.copied()
