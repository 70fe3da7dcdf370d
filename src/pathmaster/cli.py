"""
Command-line interface for pathmaster.

Provides commands for inspecting PATH, removing invalid entries, and
managing the tool's settings.
"""

import sys

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

import click

from pathmaster.backup import BackupError, list_backups
from pathmaster.config import (
    get_config_path,
    get_configured_shell,
    load_config,
    set_configured_shell,
    unset_configured_shell,
)
from pathmaster.flush import flush_invalid_paths
from pathmaster.logging_config import setup_logging
from pathmaster.path_env import (
    find_invalid_entries,
    get_path_entries,
    is_valid_path_entry,
)
from pathmaster.shell.registry import detect_shell_kind
from pathmaster.shell.types import ShellKind
from pathmaster.updater import get_shell_handler

try:
    __version__ = get_version("pathmaster")
except PackageNotFoundError:
    __version__ = "dev"

SHELL_CHOICE = click.Choice([kind.value for kind in ShellKind])


shell_option = click.option(
    "--shell",
    type=SHELL_CHOICE,
    default=None,
    help="Shell dialect to edit (default: config, then $SHELL)",
)


@click.group()
@click.version_option(__version__, prog_name="pathmaster")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """pathmaster: keep your PATH free of stale directories"""
    setup_logging(verbose=verbose, console_format="%(levelname)s: %(message)s")


@cli.command()
@shell_option
@click.option("--dry-run", is_flag=True, help="Show what would be removed")
def flush(shell: str | None, dry_run: bool) -> None:
    """Remove invalid directories from PATH and the shell config."""
    handler = get_shell_handler(shell)

    try:
        result = flush_invalid_paths(handler, dry_run=dry_run)
    except BackupError as e:
        click.echo(f"✗ Error creating backup: {e}", err=True)
        sys.exit(1)

    if not result.removed:
        click.echo("No invalid paths found in PATH.")
        return

    for entry in result.removed:
        prefix = "Would remove" if dry_run else "Removing"
        click.echo(f"{prefix} invalid path: {entry}")

    if dry_run:
        click.echo(
            f"\n{result.removed_count} invalid path(s) would be removed from "
            f"{handler.get_config_path()}"
        )
        return

    update = result.config_update
    if update is not None and update.success:
        click.echo(
            f"✓ Successfully removed {result.removed_count} invalid path(s) "
            f"and updated {update.config_path}"
        )
        return

    error = update.error if update is not None else "not attempted"
    click.echo(f"✗ Error updating shell configuration: {error}", err=True)
    click.echo(
        "Warning: PATH environment variable was updated for current session only.",
        err=True,
    )
    click.echo(
        "To make changes permanent, you'll need to manually update your "
        "shell configuration.",
        err=True,
    )


@cli.command()
def check() -> None:
    """Report invalid directories in PATH without changing anything."""
    entries = get_path_entries()
    invalid = find_invalid_entries(entries)

    if not invalid:
        click.echo(f"✓ All {len(entries)} PATH entries are valid.")
        return

    click.echo(f"Found {len(invalid)} invalid path(s):")
    for entry in invalid:
        click.echo(f"  ✗ {entry}")
    click.echo("\nRun 'pathmaster flush' to remove them.")


@cli.command("list")
def list_entries() -> None:
    """List PATH entries in search order."""
    entries = get_path_entries()

    if not entries:
        click.echo("PATH is empty.")
        return

    for index, entry in enumerate(entries, start=1):
        mark = "✓" if is_valid_path_entry(entry) else "✗"
        click.echo(f"{index:3d}. {mark} {entry}")


@cli.command("shell-info")
@shell_option
def shell_info(shell: str | None) -> None:
    """Show the detected shell and the PATH entries in its config file."""
    detected = detect_shell_kind()
    handler = get_shell_handler(shell)
    config_path = handler.get_config_path()

    click.echo(f"Detected shell: {detected.value if detected else 'unknown'}")
    click.echo(f"Handler:        {handler}")
    click.echo(f"Config file:    {config_path}")

    if not config_path.exists():
        click.echo("\nConfig file does not exist yet.")
        return

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {config_path}: {e}")

    entries = handler.parse_path_entries(content)
    modifications = handler.detect_path_modifications(content)

    click.echo(f"\nPATH assignments: {len(modifications)}")
    for mod in modifications:
        click.echo(f"  line {mod.line_number}: {mod.content.strip()}")

    click.echo(f"\nEntries ({len(entries)}):")
    for entry in entries:
        click.echo(f"  {entry}")


@cli.command()
@click.option("--limit", "-n", type=int, default=10, help="Show at most N backups")
def history(limit: int) -> None:
    """List PATH backups, newest first."""
    backups = list_backups()

    if not backups:
        click.echo("No backups found.")
        return

    for record_path, record in backups[:limit]:
        click.echo(f"{record.timestamp:%Y-%m-%d %H:%M:%S}  {record_path.name}")
        if record.config_backup:
            click.echo(f"    config: {record.config_path} -> {record.config_backup}")


@cli.group()
def config() -> None:
    """Manage pathmaster settings."""


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    config_path = get_config_path()
    settings = load_config()

    click.echo(f"Config file: {config_path}")
    if not settings:
        click.echo("(no settings)")
        return

    shell = get_configured_shell()
    click.echo(f"Shell override: {shell or '(auto-detect)'}")
    for section, values in settings.items():
        if isinstance(values, dict):
            click.echo(f"\n[{section}]")
            for key, value in values.items():
                click.echo(f"  {key} = {value}")


@config.command("set-shell")
@click.argument("kind", type=SHELL_CHOICE)
def config_set_shell(kind: str) -> None:
    """Always edit the config file of the given shell."""
    try:
        set_configured_shell(kind)
    except PermissionError as e:
        raise click.ClickException(str(e))
    click.echo(f"✓ Shell set to '{kind}'")


@config.command("unset-shell")
def config_unset_shell() -> None:
    """Go back to detecting the shell from $SHELL."""
    if get_configured_shell() is None:
        click.echo("No shell override is set.")
        return

    unset_configured_shell()
    click.echo("✓ Shell override removed")


if __name__ == "__main__":
    cli()
