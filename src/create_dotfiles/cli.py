"""Command line interface for create-dotfiles."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.config import ConfigStore
from .core.errors import DotfilesError
from .core.logging import setup_logging
from .core.manager import DotfileManager
from .core.paths import HomeContext
from .core.report import SyncReport

console = Console()


@click.group(invoke_without_command=True)
@click.option(
    "--home",
    "home_dir",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="Home directory to work in (defaults to the current user's home)",
)
@click.option("--debug", is_flag=True, help="Show debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
@click.version_option(__version__, prog_name="create-dotfiles")
@click.pass_context
def cli(ctx: click.Context, home_dir: Optional[Path], debug: bool, log_file: Optional[str]) -> None:
    """Back up and restore dotfiles.

    The files to manage are listed in ~/.dotfilesrc.toml, which is created
    with sensible defaults on first run.

    Main commands:

      backup    Copy dotfiles into the backup directory (default)
      restore   Copy dotfiles from the backup directory back home
      init      Write the default configuration file

    Running without a command performs a backup.
    """
    ctx.ensure_object(dict)
    ctx.obj["home_dir"] = home_dir

    if debug or log_file:
        setup_logging(debug=debug, log_file=log_file)

    if ctx.invoked_subcommand is None:
        ctx.invoke(backup)


def _load_manager(ctx: click.Context) -> DotfileManager:
    try:
        return DotfileManager.from_home(ctx.obj.get("home_dir"), console)
    except DotfilesError as e:
        console.print(f"[red]Error: {escape(str(e))}")
        raise click.Abort()


def _finish(report: SyncReport) -> None:
    console.print()
    report.render(console)


@cli.command()
@click.pass_context
def backup(ctx: click.Context) -> None:
    """Copy configured dotfiles into the backup directory.

    Every entry in the config is copied from the home directory into the
    backup directory (default ~/.dotfiles), overwriting earlier copies. The
    backup directory is then packed into ~/.dotfiles-backup.tar.gz.

    Missing entries are reported and skipped over; they do not stop the run.

    Examples:

      # Back up using ~/.dotfilesrc.toml
      create-dotfiles

      # Back up a different home directory
      create-dotfiles --home /tmp/home backup
    """
    manager = _load_manager(ctx)
    try:
        report = manager.backup()
    except DotfilesError as e:
        console.print(f"[red]Error: {escape(str(e))}")
        raise click.Abort()
    _finish(report)


@cli.command()
@click.pass_context
def restore(ctx: click.Context) -> None:
    """Restore dotfiles from the backup directory to the home directory.

    Entries that already exist in the home directory are never overwritten;
    they are reported as failures. Entries missing from the backup are
    skipped.

    Examples:

      # Restore into the current user's home
      create-dotfiles restore
    """
    manager = _load_manager(ctx)
    try:
        report = manager.restore()
    except DotfilesError as e:
        console.print(f"[red]Error: {escape(str(e))}")
        raise click.Abort()
    _finish(report)


@cli.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write the default configuration file.

    Example:

      # Create ~/.dotfilesrc.toml with the default file list
      create-dotfiles init
    """
    context = HomeContext.for_home(ctx.obj.get("home_dir"))
    store = ConfigStore(context.config_path, console)
    path = escape(str(context.config_path))
    if store.initialize(force=force):
        console.print(f"[green]Wrote default config: {path}")
    else:
        console.print(f"[yellow]Config already exists: {path} (use --force to overwrite)")


def main() -> None:
    """Entry point for the create-dotfiles CLI."""
    cli()


if __name__ == "__main__":
    main()
