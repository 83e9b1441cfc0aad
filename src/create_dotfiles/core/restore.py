"""Restore functionality for dotfiles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .copier import attempt_copy
from .errors import BackupMissingError, InvalidEntryError
from .paths import HomeContext, resolve_dest, resolve_source
from .report import CopyOutcome, SyncReport

logger = logging.getLogger(__name__)


class RestoreManager:
    """Manage restoring dotfiles from the backup directory.

    Restore never overwrites: an entry that already exists in the home
    directory is reported as a failure and left untouched.
    """

    def __init__(self, context: HomeContext, console: Optional[Console] = None) -> None:
        """Initialize restore manager.

        Args:
            context: Home, config and backup paths.
            console: Rich console for output.
        """
        self.context = context
        self.console = console or Console()
        self.logger = logging.getLogger(__name__)
        self.logger.debug("RestoreManager initialized with backup directory: %s", self.backup_dir)

    @property
    def backup_dir(self) -> Path:
        return self.context.backup_dir

    def restore_entry(self, entry: str) -> CopyOutcome:
        """Restore one entry from the backup directory into the home directory."""
        try:
            src = resolve_source(self.backup_dir, entry)
            dest = resolve_dest(self.context.home_dir, entry)
        except InvalidEntryError as e:
            return CopyOutcome.failed(str(e))

        if not src.exists():
            return CopyOutcome.skipped("not in backup")

        # a dangling symlink in home counts as existing
        if dest.exists() or dest.is_symlink():
            return CopyOutcome.failed(f"already exists at {dest}")

        return attempt_copy(src, dest)

    def restore(self, entries: List[str]) -> SyncReport:
        """Restore the given entries.

        Args:
            entries: Entries relative to the home directory, in processing order.

        Returns:
            One outcome per entry, in processing order.

        Raises:
            BackupMissingError: If the backup directory does not exist.
        """
        self.console.print(
            "\n[bold]\\[Restore] Copying dotfiles from backup to home directory...\n"
        )

        if not self.backup_dir.exists():
            raise BackupMissingError(f"Backup directory not found: {self.backup_dir}")

        report = SyncReport("restore")
        for entry in entries:
            outcome = self.restore_entry(entry)
            report.add(entry, outcome)
            self.console.print(outcome.format(entry))
            self.logger.debug("restore %s: %s %s", entry, outcome.tag, outcome.reason or "")

        self.console.print("\n[green]Restore complete!")
        return report
