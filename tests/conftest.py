"""Test configuration."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from create_dotfiles.core.config import CONFIG_FILE
from create_dotfiles.core.paths import HomeContext


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Create a temporary home directory for tests."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def console() -> Console:
    """Console that writes to memory instead of the terminal."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def context(home: Path) -> HomeContext:
    """Home context with the default backup directory."""
    return HomeContext.for_home(home)


@pytest.fixture
def write_config(home: Path) -> Callable[[str], Path]:
    """Return a helper that writes ~/.dotfilesrc.toml."""

    def _write(content: str) -> Path:
        config_path = home / CONFIG_FILE
        config_path.write_text(content)
        return config_path

    return _write


@pytest.fixture
def create_file(home: Path) -> Callable[..., Path]:
    """Return a helper that creates a file under a root (home by default)."""

    def _create(relative_path: str, content: str = "test", root: Path = home) -> Path:
        full_path = root / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)
        return full_path

    return _create

