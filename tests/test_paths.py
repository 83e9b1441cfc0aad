"""Tests for path resolution."""

from pathlib import Path

import pytest

from create_dotfiles.core.errors import InvalidEntryError
from create_dotfiles.core.paths import HomeContext, resolve_dest, resolve_source


def test_resolve_simple_entry(tmp_path: Path) -> None:
    """Test joining a plain dotfile name."""
    assert resolve_source(tmp_path, ".zshrc") == tmp_path / ".zshrc"
    assert resolve_dest(tmp_path / ".dotfiles", ".zshrc") == tmp_path / ".dotfiles" / ".zshrc"


def test_resolve_nested_entry_with_spaces(tmp_path: Path) -> None:
    """Test that nested paths with spaces resolve to the expected location."""
    entry = "Library/Application Support/Code/User/settings.json"
    expected = tmp_path / "Library" / "Application Support" / "Code" / "User" / "settings.json"
    assert resolve_source(tmp_path, entry) == expected


def test_resolve_normalizes(tmp_path: Path) -> None:
    """Test that redundant separators and dots are normalized."""
    assert resolve_source(tmp_path, "./.config//nvim/") == tmp_path / ".config" / "nvim"
    assert resolve_source(tmp_path, ".config/x/../nvim") == tmp_path / ".config" / "nvim"


def test_resolve_does_not_touch_filesystem(tmp_path: Path) -> None:
    """Test that resolving a missing path works without creating it."""
    path = resolve_dest(tmp_path, ".config/missing/file")
    assert not path.exists()
    assert not (tmp_path / ".config").exists()


@pytest.mark.parametrize("entry", ["", "   ", "/etc/passwd", "../outside", ".config/../..", "."])
def test_resolve_rejects_invalid_entries(tmp_path: Path, entry: str) -> None:
    """Test that entries outside the root are rejected."""
    with pytest.raises(InvalidEntryError):
        resolve_source(tmp_path, entry)


def test_home_context(tmp_path: Path) -> None:
    """Test that the context derives config and backup paths from home."""
    context = HomeContext.for_home(tmp_path, ".my-backup")
    assert context.home_dir == tmp_path
    assert context.config_path == tmp_path / ".dotfilesrc.toml"
    assert context.backup_dir == tmp_path / ".my-backup"


def test_home_context_defaults_to_user_home() -> None:
    """Test that the context falls back to the current user's home."""
    context = HomeContext.for_home()
    assert context.home_dir == Path.home()
    assert context.backup_dir == Path.home() / ".dotfiles"


def test_home_context_is_immutable(tmp_path: Path) -> None:
    """Test that the context cannot be changed after construction."""
    context = HomeContext.for_home(tmp_path)
    with pytest.raises(AttributeError):
        context.backup_dir = tmp_path / "other"  # type: ignore[misc]
