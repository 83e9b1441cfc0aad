"""Path resolution for configured entries.

Entries are relative paths such as ``.zshrc`` or
``Library/Application Support/Code/User/settings.json``. They are joined onto
a root directory (home or backup) without touching the filesystem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import CONFIG_FILE, DEFAULT_BACKUP_DIR
from .errors import InvalidEntryError


@dataclass(frozen=True)
class HomeContext:
    """Directories a manager works with, fixed at construction."""

    home_dir: Path
    config_path: Path
    backup_dir: Path

    @classmethod
    def for_home(
        cls, home_dir: Optional[Union[str, Path]] = None, backup_dir: str = DEFAULT_BACKUP_DIR
    ) -> HomeContext:
        """Build a context rooted at ``home_dir``.

        Args:
            home_dir: Root directory. Defaults to the current user's home.
            backup_dir: Backup directory name relative to the root.
        """
        home = Path(home_dir).expanduser() if home_dir is not None else Path.home()
        home = Path(os.path.abspath(home))
        return cls(
            home_dir=home,
            config_path=home / CONFIG_FILE,
            backup_dir=_join(home, backup_dir),
        )


def _join(root: Path, entry: str) -> Path:
    return Path(os.path.normpath(Path(root) / entry))


def _resolve(root: Union[str, Path], entry: str) -> Path:
    if not entry or not entry.strip():
        raise InvalidEntryError("empty entry")
    if Path(entry).is_absolute():
        raise InvalidEntryError(f"entry must be relative: {entry}")

    root_path = Path(os.path.normpath(root))
    path = _join(root_path, entry)
    if path == root_path or root_path not in path.parents:
        raise InvalidEntryError(f"entry points outside {root_path}: {entry}")
    return path


def resolve_source(root: Union[str, Path], entry: str) -> Path:
    """Resolve the absolute source path of an entry under ``root``.

    Raises:
        InvalidEntryError: If the entry is empty, absolute, or escapes ``root``.
    """
    return _resolve(root, entry)


def resolve_dest(root: Union[str, Path], entry: str) -> Path:
    """Resolve the absolute destination path of an entry under ``root``.

    Raises:
        InvalidEntryError: If the entry is empty, absolute, or escapes ``root``.
    """
    return _resolve(root, entry)
