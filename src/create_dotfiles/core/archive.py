"""
Module for packaging the backup directory into a compressed archive.

The archive is a gzip-compressed tar file at ``<home>/.dotfiles-backup.tar.gz``
whose single top-level member is the backup directory. It is rebuilt from
scratch on every backup run.
"""

import logging
import os
import tarfile
from pathlib import Path
from typing import List, Optional

from rich.progress import Progress, TaskID

from .errors import ArchiveError

ARCHIVE_NAME = ".dotfiles-backup.tar.gz"

logger = logging.getLogger(__name__)


class ArchiveBuilder:
    """Builds the backup archive."""

    def __init__(self, home_dir: Path, backup_dir: Path):
        """
        Initialize the ArchiveBuilder.

        Args:
            home_dir: Home directory; the archive is written here and member
                      names are relative to it
            backup_dir: Backup directory to archive
        """
        self.home_dir = Path(home_dir)
        self.backup_dir = Path(backup_dir)
        self.archive_path = self.home_dir / ARCHIVE_NAME

    @property
    def arcname(self) -> str:
        """Name of the backup directory inside the archive."""
        try:
            return self.backup_dir.relative_to(self.home_dir).as_posix()
        except ValueError:
            return self.backup_dir.name

    def build(self, progress: Optional[Progress] = None) -> Path:
        """
        Create the archive, replacing any existing one.

        Args:
            progress: Optional Progress instance for progress tracking

        Returns:
            Path of the written archive

        Raises:
            ArchiveError: If the backup directory is missing or the archive
                          cannot be written
        """
        if not self.backup_dir.is_dir():
            raise ArchiveError(f"Backup directory {self.backup_dir} does not exist")

        members = self._get_members()

        task_id: Optional[TaskID] = None
        if progress:
            task_id = progress.add_task(
                f"Creating archive: {self.archive_path.name}", total=len(members)
            )

        logger.debug("Archiving %d paths from %s", len(members), self.backup_dir)
        try:
            with tarfile.open(self.archive_path, "w:gz") as tf:
                tf.add(self.backup_dir, arcname=self.arcname, recursive=False)
                for path in members:
                    rel_path = path.relative_to(self.backup_dir).as_posix()
                    tf.add(path, arcname=f"{self.arcname}/{rel_path}", recursive=False)

                    if progress and task_id is not None:
                        progress.advance(task_id)

        except OSError as e:
            if self.archive_path.is_file():
                self.archive_path.unlink()
            raise ArchiveError(f"Failed to create archive: {e}") from e

        return self.archive_path

    def _get_members(self) -> List[Path]:
        """
        Get the directories and files below the backup directory, parents first.

        Returns:
            List of Path objects to add to the archive
        """
        paths = []
        for root, dirnames, filenames in os.walk(self.backup_dir):
            dirnames.sort()
            root_path = Path(root)
            for dirname in dirnames:
                paths.append(root_path / dirname)
            for filename in sorted(filenames):
                paths.append(root_path / filename)
        return paths
