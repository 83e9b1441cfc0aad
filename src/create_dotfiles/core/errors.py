"""Exceptions raised by the dotfiles core.

Fatal conditions (bad config, unusable backup directory, missing backup on
restore, archive failure) propagate to the CLI and abort the run. Per-entry
conditions (``SourceNotFoundError``, ``InvalidEntryError``) are turned into
report outcomes by the copy layer and never reach the caller.
"""


class DotfilesError(Exception):
    """Base class for all dotfiles errors."""


class ConfigError(DotfilesError):
    """Configuration file has invalid values."""


class ConfigParseError(ConfigError):
    """Configuration file exists but cannot be read or parsed."""


class BackupDirectoryError(DotfilesError):
    """Backup directory cannot be created or used."""


class BackupPathNotADirectoryError(BackupDirectoryError):
    """Backup path exists but is not a directory."""


class BackupMissingError(DotfilesError):
    """Restore was requested but the backup directory does not exist."""


class SourceNotFoundError(DotfilesError):
    """Copy source does not exist.

    The message is the underlying OS error text, kept as-is for diagnostics.
    """


class InvalidEntryError(DotfilesError):
    """Configured entry is absolute or points outside its root."""


class ArchiveError(DotfilesError):
    """Backup archive could not be written."""
