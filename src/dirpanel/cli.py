"""
CLI entry point for dirpanel.

Modified: 2026-10-18
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from dirpanel import __version__
from dirpanel.config.settings import Settings
from dirpanel.core.exceptions import ConfigurationError
from dirpanel.core.models import DirectoryView, SortKey
from dirpanel.core.navigator import Navigator
from dirpanel.core.workspace import WorkspaceProvider

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

SORT_CHOICES = [key.value for key in SortKey]


def setup_logging(settings: Settings) -> Optional[Path]:
    """
    Send dirpanel logs to the configured log file.

    The TUI owns the terminal, so nothing is logged to stderr.

    Returns:
        Path of the log file, or None if it could not be opened
    """
    logger = logging.getLogger("dirpanel")
    logger.setLevel(getattr(logging, settings.logging.level, logging.INFO))
    logger.propagate = False
    logger.handlers.clear()

    log_file = Path(settings.logging.file).expanduser()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        click.echo(f"✗ Could not open log file {log_file}: {e}", err=True)
        logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return log_file


def load_settings(config_path: Optional[Path]) -> Settings:
    try:
        return Settings.load(config_path)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """dirpanel - browse, sort and filter a directory from the terminal."""
    pass


@cli.command()
@click.argument(
    "directory",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace root; 'up' navigation stays inside it (default: current directory)",
)
@click.option("--no-workspace", is_flag=True, help="Browse without a workspace root")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/dirpanel/config.yaml)",
)
def browse(directory: Optional[Path], workspace: Optional[Path], no_workspace: bool, config_path: Optional[Path]):
    """Open the directory panel."""
    settings = load_settings(config_path)
    setup_logging(settings)

    try:
        import asyncio
        from dirpanel.tui.app import run_app

        asyncio.run(
            run_app(
                settings=settings,
                workspace_root=str(workspace) if workspace else None,
                start_directory=directory,
                no_workspace=no_workspace,
            )
        )
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
    except Exception as e:
        logging.getLogger(__name__).error(f"TUI error: {e}", exc_info=True)
        click.echo(f"✗ TUI error: {e}", err=True)
        sys.exit(1)


@cli.command(name="ls")
@click.argument(
    "directory",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(SORT_CHOICES),
    default=SortKey.NAME.value,
    help="Column to sort by",
)
@click.option("--desc", is_flag=True, help="Sort in descending order")
@click.option("--search", default="", help="Only show names containing this text (case-insensitive)")
@click.option(
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace root (default: current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file",
)
def list_directory(
    directory: Optional[Path],
    sort_by: str,
    desc: bool,
    search: str,
    workspace: Optional[Path],
    config_path: Optional[Path],
):
    """Print a directory listing the way the panel shows it."""
    settings = load_settings(config_path)

    provider = WorkspaceProvider.from_settings(settings, override=str(workspace) if workspace else None)
    navigator = Navigator(
        provider,
        start_directory=str(directory) if directory else None,
        hidden_marker=settings.display.hidden_marker,
        date_format=settings.display.date_format,
        size_placeholder=settings.display.size_placeholder,
    )

    # Same gestures the panel uses: pick the column, click it again to reverse
    key = SortKey(sort_by)
    if key is not navigator.state.sort_key:
        navigator.set_sort(key)
    if desc:
        navigator.set_sort(key)
    navigator.set_search(search)

    view = navigator.render()
    if not isinstance(view, DirectoryView):
        click.echo(f"✗ {view.message}", err=True)
        sys.exit(1)

    click.echo(view.directory)
    header = "  ".join(column.title for column in view.columns)
    click.echo(header)
    click.echo("-" * len(header))

    if view.is_empty:
        click.echo("No files/folders")
        return

    name_width = max(len(row.name) for row in view.rows) + 1
    for row in view.rows:
        name = row.name + ("/" if row.is_directory else "")
        click.echo(
            f"{name:<{name_width}}  {row.size_text:>10}  "
            f"{row.created_text:<16}  {row.modified_text:<16}".rstrip()
        )


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config file",
)
def status(config_path: Optional[Path]):
    """Show the effective configuration."""
    settings = load_settings(config_path)
    provider = WorkspaceProvider.from_settings(settings)

    click.echo(f"dirpanel v{__version__}")

    click.echo("\nWorkspace:")
    if provider.root:
        click.echo(f"  Root: {provider.root}")
    else:
        click.echo("  ✗ No workspace root")

    click.echo("\nDisplay:")
    click.echo(f"  Hidden marker: {settings.display.hidden_marker!r}")
    click.echo(f"  Date format: {settings.display.date_format}")
    click.echo(f"  Search debounce: {settings.behavior.search_debounce}s")

    click.echo("\nEditor:")
    click.echo(f"  Command: {settings.editor.command or '$VISUAL / $EDITOR'}")

    click.echo("\nLogging:")
    click.echo(f"  Level: {settings.logging.level}")
    click.echo(f"  File: {settings.logging.file}")


if __name__ == "__main__":
    cli()
