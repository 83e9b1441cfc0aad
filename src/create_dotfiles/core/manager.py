"""Top-level entry points for backing up and restoring dotfiles."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from .backup import BackupManager
from .config import Config, ConfigStore
from .paths import HomeContext
from .report import SyncReport
from .restore import RestoreManager


class DotfileManager:
    """Backs up and restores the entries of one home directory.

    The constructor does no I/O; use :meth:`from_home` to load (and, on first
    run, create) the config file.

    Example:
        ```python
        manager = DotfileManager.from_home("/tmp/home")
        report = manager.backup()
        print(report.summary())
        ```
    """

    def __init__(
        self, context: HomeContext, config: Config, console: Optional[Console] = None
    ) -> None:
        self.context = context
        self.config = config
        self.console = console or Console()

    @classmethod
    def from_home(
        cls, home_dir: Optional[Union[str, Path]] = None, console: Optional[Console] = None
    ) -> DotfileManager:
        """Load the config under ``home_dir`` and build a manager.

        Args:
            home_dir: Root directory. Defaults to the current user's home.
            console: Rich console for output.

        Raises:
            ConfigParseError: If the config file exists but cannot be parsed.
            ConfigError: If the config holds invalid values.
        """
        console = console or Console()
        config_path = HomeContext.for_home(home_dir).config_path
        config = ConfigStore(config_path, console).load_or_initialize()
        context = HomeContext.for_home(home_dir, config.backup_dir)
        return cls(context, config, console)

    @property
    def home_dir(self) -> Path:
        return self.context.home_dir

    @property
    def backup_dir(self) -> Path:
        return self.context.backup_dir

    @property
    def files(self) -> List[str]:
        return list(self.config.files)

    def backup(self) -> SyncReport:
        """Copy configured entries into the backup directory and archive it."""
        return BackupManager(self.context, self.console).backup(self.config.files)

    def restore(self) -> SyncReport:
        """Copy configured entries from the backup directory into home."""
        return RestoreManager(self.context, self.console).restore(self.config.files)
