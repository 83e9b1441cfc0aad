"""Test restore module."""

from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from create_dotfiles.core.errors import BackupMissingError
from create_dotfiles.core.paths import HomeContext
from create_dotfiles.core.report import OutcomeStatus
from create_dotfiles.core.restore import RestoreManager


@pytest.fixture
def restore_manager(context: HomeContext, console: Console) -> RestoreManager:
    """Create a restore manager for the temporary home."""
    return RestoreManager(context, console)


@pytest.fixture
def backup_dir(home: Path) -> Path:
    """Create the default backup directory."""
    backup_dir = home / ".dotfiles"
    backup_dir.mkdir()
    return backup_dir


def test_restore_file(
    restore_manager: RestoreManager,
    home: Path,
    backup_dir: Path,
    create_file: Callable[..., Path],
) -> None:
    """Test that a backed up file is restored into home."""
    create_file(".testrc", "restored config", root=backup_dir)

    report = restore_manager.restore([".testrc"])

    assert (home / ".testrc").read_text() == "restored config"
    outcome = report.outcome(".testrc")
    assert outcome is not None and outcome.status is OutcomeStatus.COPIED


def test_restore_directory(
    restore_manager: RestoreManager,
    home: Path,
    backup_dir: Path,
    create_file: Callable[..., Path],
) -> None:
    """Test that a directory entry is restored recursively."""
    create_file(".config/myapp/settings.json", "{}", root=backup_dir)
    create_file(".config/myapp/nested/a.txt", "a", root=backup_dir)

    restore_manager.restore([".config/myapp"])

    assert (home / ".config" / "myapp" / "settings.json").read_text() == "{}"
    assert (home / ".config" / "myapp" / "nested" / "a.txt").read_text() == "a"


def test_restore_never_overwrites(
    restore_manager: RestoreManager,
    home: Path,
    backup_dir: Path,
    create_file: Callable[..., Path],
) -> None:
    """Test that existing home content is left untouched."""
    create_file(".testrc", "backup", root=backup_dir)
    create_file(".testrc", "existing")

    report = restore_manager.restore([".testrc"])

    assert (home / ".testrc").read_text() == "existing"
    outcome = report.outcome(".testrc")
    assert outcome is not None
    assert outcome.status is OutcomeStatus.FAILED
    assert outcome.reason == f"already exists at {home / '.testrc'}"


def test_restore_never_merges_into_existing_directory(
    restore_manager: RestoreManager,
    home: Path,
    backup_dir: Path,
    create_file: Callable[..., Path],
) -> None:
    """Test that an existing directory in home is refused as a whole."""
    create_file(".config/myapp/new.json", "{}", root=backup_dir)
    (home / ".config" / "myapp").mkdir(parents=True)

    report = restore_manager.restore([".config/myapp"])

    assert not (home / ".config" / "myapp" / "new.json").exists()
    assert report.failed == 1


def test_restore_missing_from_backup_is_skipped(
    restore_manager: RestoreManager, home: Path, backup_dir: Path
) -> None:
    """Test that entries absent from the backup are skipped, not failed."""
    report = restore_manager.restore([".testrc"])

    outcome = report.outcome(".testrc")
    assert outcome is not None
    assert outcome.status is OutcomeStatus.SKIPPED
    assert outcome.reason == "not in backup"
    assert report.failed == 0
    assert not (home / ".testrc").exists()


def test_restore_without_backup_dir(restore_manager: RestoreManager) -> None:
    """Test that restore fails when there is no backup directory."""
    with pytest.raises(BackupMissingError, match="Backup directory not found"):
        restore_manager.restore([".testrc"])


def test_restore_empty_entry_list(restore_manager: RestoreManager, backup_dir: Path) -> None:
    """Test that an empty entry list gives an empty report."""
    report = restore_manager.restore([])
    assert len(report) == 0
    assert report.summary() == "0 copied, 0 skipped, 0 failed"


def test_restore_mixed_outcomes_in_order(
    restore_manager: RestoreManager,
    console: Console,
    home: Path,
    backup_dir: Path,
    create_file: Callable[..., Path],
) -> None:
    """Test that outcomes are reported in declaration order."""
    create_file(".a", "a", root=backup_dir)
    create_file(".c", "backup c", root=backup_dir)
    create_file(".c", "home c")

    report = restore_manager.restore([".a", ".b", ".c"])

    assert [(entry, outcome.tag) for entry, outcome in report] == [
        (".a", "OK"),
        (".b", "SKIP"),
        (".c", "FAIL"),
    ]
    output = console.file.getvalue()  # type: ignore[attr-defined]
    assert "[SKIP] .b: not in backup" in output
    assert "Restore complete!" in output
