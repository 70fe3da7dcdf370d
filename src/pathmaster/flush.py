"""
Removal of invalid PATH entries.

The flush runs in a fixed order:
1. Back up the current PATH (and the shell config file)
2. Drop entries that are not existing directories
3. Apply the new PATH to the running process
4. Rewrite the shell config so the change persists

A failed backup aborts before anything is touched. A failed config rewrite
does not undo step 3; the result records that the change is session-only.
"""

import logging

from collections.abc import MutableMapping
from pathlib import Path

from pydantic import BaseModel, Field

from pathmaster.backup import create_backup
from pathmaster.path_env import (
    format_path_value,
    get_path_entries,
    is_valid_path_entry,
    set_path_entries,
)
from pathmaster.shell.base import ShellHandler
from pathmaster.updater import ConfigUpdateResult, update_shell_config

logger = logging.getLogger(__name__)


class FlushResult(BaseModel):
    """Outcome of a flush."""

    removed: list[Path] = Field(default_factory=list, description="Dropped entries")
    kept: list[Path] = Field(default_factory=list, description="Remaining entries")
    backup_path: Path | None = Field(default=None, description="Backup record")
    config_update: ConfigUpdateResult | None = Field(
        default=None, description="Config rewrite outcome, None if not attempted"
    )

    @property
    def removed_count(self) -> int:
        return len(self.removed)

    @property
    def session_only(self) -> bool:
        """True when PATH changed but the config file could not be updated."""
        return self.config_update is not None and not self.config_update.success


def flush_invalid_paths(
    handler: ShellHandler,
    *,
    environ: MutableMapping[str, str] | None = None,
    backup_dir: Path | None = None,
    dry_run: bool = False,
) -> FlushResult:
    """
    Remove invalid directories from PATH and persist the result.

    Args:
        handler: Shell handler whose config file gets rewritten
        environ: Environment mapping to modify (default: os.environ)
        backup_dir: Backup directory override
        dry_run: Only compute what would be removed

    Returns:
        FlushResult describing what changed

    Raises:
        BackupError: If the backup could not be written; nothing was modified
    """
    current = get_path_entries(environ)

    kept: list[Path] = []
    removed: list[Path] = []
    for entry in current:
        if is_valid_path_entry(entry):
            kept.append(entry)
        else:
            removed.append(entry)

    result = FlushResult(removed=removed, kept=kept)

    if dry_run or not removed:
        return result

    result.backup_path = create_backup(
        format_path_value(current), handler=handler, backup_dir=backup_dir
    )

    for entry in removed:
        logger.info(f"Removing invalid path: {entry}")

    set_path_entries(kept, environ)
    result.config_update = update_shell_config(kept, handler)
    return result
