"""Backup functionality for dotfiles.

This module copies the configured entries from the home directory into the
backup directory and then packages the backup directory into an archive.
Each entry is handled on its own: a missing or unreadable entry is reported
and the run moves on to the next one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .archive import ArchiveBuilder
from .copier import attempt_copy
from .errors import BackupDirectoryError, BackupPathNotADirectoryError, InvalidEntryError
from .paths import HomeContext, resolve_dest, resolve_source
from .report import CopyOutcome, SyncReport

logger = logging.getLogger(__name__)


class BackupManager:
    """Manages backups of configured dotfiles.

    The backup process:
    - Ensures the backup directory exists
    - Copies every entry from the home directory, overwriting earlier copies
    - Builds ``~/.dotfiles-backup.tar.gz`` from the backup directory

    Attributes:
        context (HomeContext): Home, config and backup paths
        console (Console): Rich console for output formatting
        archive_path (Optional[Path]): Archive written by the last run
    """

    def __init__(self, context: HomeContext, console: Optional[Console] = None):
        """Initialize the backup manager.

        Args:
            context (HomeContext): Home, config and backup paths
            console (Optional[Console]): Rich console for output. If None, creates
                                      a new console.
        """
        self.context = context
        self.console = console or Console()
        self.archive_path: Optional[Path] = None

    @property
    def backup_dir(self) -> Path:
        return self.context.backup_dir

    def ensure_backup_dir(self) -> None:
        """Create the backup directory if it is missing.

        Raises:
            BackupPathNotADirectoryError: If the backup path exists but is not a
                                          directory.
            BackupDirectoryError: If the backup directory cannot be created.
        """
        if not self.backup_dir.exists():
            try:
                self.backup_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise BackupDirectoryError(
                    f"Cannot create backup directory {self.backup_dir}: {e}"
                ) from e
            self.console.print(f"Created backup directory: {escape(str(self.backup_dir))}")

        if not self.backup_dir.is_dir():
            raise BackupPathNotADirectoryError(f"{self.backup_dir} is not a directory")

    def backup_entry(self, entry: str) -> CopyOutcome:
        """Copy one entry from the home directory into the backup directory."""
        try:
            src = resolve_source(self.context.home_dir, entry)
            dest = resolve_dest(self.backup_dir, entry)
        except InvalidEntryError as e:
            return CopyOutcome.failed(str(e))

        if src == self.backup_dir or src in self.backup_dir.parents:
            return CopyOutcome.failed("contains the backup directory")
        return attempt_copy(src, dest)

    def backup(self, entries: List[str]) -> SyncReport:
        """Back up the given entries and rebuild the archive.

        Args:
            entries (List[str]): Entries relative to the home directory, in
                                 processing order

        Returns:
            SyncReport: One outcome per entry, in processing order

        Raises:
            BackupDirectoryError: If the backup directory is unusable
            ArchiveError: If the archive cannot be written
        """
        self.console.print("\n[bold]\\[Backup] Copying dotfiles to backup directory...\n")
        self.ensure_backup_dir()

        report = SyncReport("backup")
        for entry in entries:
            outcome = self.backup_entry(entry)
            report.add(entry, outcome)
            self.console.print(outcome.format(entry))
            logger.debug("backup %s: %s %s", entry, outcome.tag, outcome.reason or "")

        builder = ArchiveBuilder(self.context.home_dir, self.backup_dir)
        self.archive_path = builder.build()

        self.console.print(f"\n[green]Backup complete! Archive: {escape(str(self.archive_path))}")
        return report
