"""Core functionality for dotfiles."""

from .archive import ArchiveBuilder
from .backup import BackupManager
from .config import Config, ConfigStore
from .manager import DotfileManager
from .paths import HomeContext
from .report import CopyOutcome, OutcomeStatus, SyncReport
from .restore import RestoreManager

__all__ = [
    "ArchiveBuilder",
    "BackupManager",
    "Config",
    "ConfigStore",
    "CopyOutcome",
    "DotfileManager",
    "HomeContext",
    "OutcomeStatus",
    "RestoreManager",
    "SyncReport",
]
