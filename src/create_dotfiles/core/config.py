"""Configuration management for dotfiles.

The configuration lives in ``~/.dotfilesrc.toml``::

    [settings]
    backup_dir = ".dotfiles"

    [files]
    list = [".zshrc", ".gitconfig"]

Loading is split into two explicit steps so that creating the default file is
never a hidden side effect: :meth:`ConfigStore.initialize` writes the default
document when the file is absent, and :meth:`ConfigStore.load` only reads.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli
from rich.console import Console
from rich.markup import escape

from .errors import ConfigError, ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILE = ".dotfilesrc.toml"
DEFAULT_BACKUP_DIR = ".dotfiles"

DEFAULT_CONFIG = """\
# ~/.dotfilesrc.toml

[settings]
backup_dir = ".dotfiles"

[files]
list = [
  # Shell
  ".zshrc",
  ".bashrc",
  ".bash_profile",

  # Git
  ".gitconfig",
  ".gitignore_global",

  # Editor - Vim/Neovim
  ".vimrc",
  ".config/nvim",

  # Editor - VS Code
  "Library/Application Support/Code/User/settings.json",
  "Library/Application Support/Code/User/keybindings.json",
  "Library/Application Support/Code/User/snippets",

  # Editor - Cursor
  "Library/Application Support/Cursor/User/settings.json",
  "Library/Application Support/Cursor/User/keybindings.json",
  "Library/Application Support/Cursor/User/snippets",

  # Tools
  ".tmux.conf",
  ".config/starship.toml",

  # Node
  ".npmrc",
]
"""


class Config:
    """Settings and file list read from the config file.

    Attributes:
        backup_dir (str): Backup directory name, relative to the home directory.
        files (List[str]): Configured entries, in declaration order.
    """

    def __init__(
        self, backup_dir: str = DEFAULT_BACKUP_DIR, files: Optional[List[str]] = None
    ) -> None:
        self.backup_dir = backup_dir
        self.files: List[str] = list(files) if files is not None else []

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Config:
        """Build a configuration from parsed TOML data.

        Missing sections or keys fall back to the defaults.

        Args:
            data: Mapping as returned by the TOML parser.

        Returns:
            Config: The configuration.

        Raises:
            ConfigError: If a section or value has the wrong type.
        """
        settings = data.get("settings", {})
        if not isinstance(settings, dict):
            raise ConfigError("[settings] must be a table")
        files = data.get("files", {})
        if not isinstance(files, dict):
            raise ConfigError("[files] must be a table")

        config = cls(
            backup_dir=settings.get("backup_dir", DEFAULT_BACKUP_DIR),
            files=files.get("list", []),
        )
        errors = config.validate()
        if errors:
            raise ConfigError("; ".join(errors))
        return config

    def validate(self) -> List[str]:
        """Validate configuration values."""
        errors = []

        if not isinstance(self.backup_dir, str):
            errors.append("settings.backup_dir must be a string")
        elif not self.backup_dir.strip():
            errors.append("settings.backup_dir must not be empty")
        elif os.path.normpath(self.backup_dir) == ".":
            errors.append("settings.backup_dir must not be the home directory itself")

        if not isinstance(self.files, list):
            errors.append("files.list must be an array")
        else:
            for entry in self.files:
                if not isinstance(entry, str):
                    errors.append(f"files.list entry {entry!r} must be a string")

        return errors

    def __repr__(self) -> str:
        return f"Config(backup_dir={self.backup_dir!r}, files={self.files!r})"


class ConfigStore:
    """Reads and initializes the configuration file."""

    def __init__(self, config_path: Path, console: Optional[Console] = None) -> None:
        """Initialize the store.

        Args:
            config_path (Path): Absolute path of the config file.
            console (Optional[Console]): Rich console for user-facing messages.
        """
        self.config_path = Path(config_path)
        self.console = console or Console()

    def exists(self) -> bool:
        """Check whether the config file exists."""
        return self.config_path.exists()

    def initialize(self, force: bool = False) -> bool:
        """Write the default config file if it does not exist.

        Args:
            force: Overwrite an existing file with the defaults.

        Returns:
            bool: True if the default config was written.
        """
        if self.exists() and not force:
            logger.debug("Config file already present: %s", self.config_path)
            return False

        path = escape(str(self.config_path))
        if self.exists():
            self.console.print(f"[yellow]Overwriting config with defaults: {path}")
        else:
            self.console.print(f"[yellow]Config file not found. Creating default config: {path}")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
        return True

    def load(self) -> Config:
        """Parse the config file.

        Returns:
            Config: The parsed configuration.

        Raises:
            ConfigParseError: If the file cannot be read or is not valid TOML.
            ConfigError: If the file parses but holds invalid values.
        """
        try:
            content = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"Cannot read config file {self.config_path}: {e}") from e

        try:
            data = tomli.loads(content)
        except tomli.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid config file {self.config_path}: {e}") from e

        config = Config.from_dict(data)
        logger.debug("Loaded %d entries from %s", len(config.files), self.config_path)
        return config

    def load_or_initialize(self) -> Config:
        """Write the default config if needed, then load it."""
        self.initialize()
        return self.load()
