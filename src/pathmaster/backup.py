"""
PATH backups.

Every mutating command snapshots the current PATH value as JSON before it
changes anything. When a shell config file exists it is copied next to the
snapshot as well.
"""

import logging
import os
import shutil

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from pathmaster.config import get_backup_dir
from pathmaster.constants import BACKUP_FILE_PREFIX, BACKUP_FILE_TIME_FORMAT
from pathmaster.shell.base import ShellHandler

logger = logging.getLogger(__name__)


class BackupRecord(BaseModel):
    """A snapshot of PATH taken before a modification."""

    timestamp: datetime = Field(description="When the backup was taken")
    path: str = Field(description="PATH value at backup time")
    shell: str | None = Field(default=None, description="Shell kind of the handler")
    config_path: Path | None = Field(
        default=None, description="Shell config file that was copied"
    )
    config_backup: Path | None = Field(
        default=None, description="Location of the config file copy"
    )


class BackupError(Exception):
    """Raised when a backup cannot be written."""

    def __init__(self, message: str, backup_dir: Path | None = None):
        super().__init__(message)
        self.backup_dir = backup_dir


def create_backup(
    path_value: str,
    *,
    handler: ShellHandler | None = None,
    backup_dir: Path | None = None,
) -> Path:
    """
    Write a backup of the PATH value and the handler's config file.

    Args:
        path_value: Raw PATH string to save
        handler: Shell handler whose config file should be copied, if any
        backup_dir: Directory to write into (default: from config)

    Returns:
        Path to the JSON backup record

    Raises:
        BackupError: If the directory, record, or config copy cannot be written
    """
    if backup_dir is None:
        backup_dir = get_backup_dir()

    now = datetime.now()
    base_stem = f"{BACKUP_FILE_PREFIX}{now.strftime(BACKUP_FILE_TIME_FORMAT)}"
    stem = base_stem
    suffix = 1
    # Never overwrite an earlier snapshot, even on a coarse clock
    while (backup_dir / f"{stem}.json").exists():
        stem = f"{base_stem}_{suffix}"
        suffix += 1
    record_path = backup_dir / f"{stem}.json"

    record = BackupRecord(timestamp=now, path=path_value)

    try:
        os.makedirs(backup_dir, mode=0o700, exist_ok=True)

        if handler is not None:
            record.shell = handler.get_shell_type().value
            config_path = handler.get_config_path()
            if config_path.exists():
                config_backup = backup_dir / f"{stem}_{config_path.name.lstrip('.')}"
                shutil.copy2(config_path, config_backup)
                record.config_path = config_path
                record.config_backup = config_backup

        record_path.write_text(record.model_dump_json(indent=2), encoding="utf-8")

    except OSError as e:
        raise BackupError(
            f"Cannot write backup to {backup_dir}: {e}", backup_dir=backup_dir
        ) from e

    logger.info(f"Backup written to {record_path}")
    return record_path


def load_backup(record_path: Path) -> BackupRecord:
    """
    Load a backup record.

    Raises:
        BackupError: If the file cannot be read or is not a backup record
    """
    try:
        return BackupRecord.model_validate_json(record_path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise BackupError(f"Cannot read backup {record_path}: {e}") from e


def list_backups(backup_dir: Path | None = None) -> list[tuple[Path, BackupRecord]]:
    """
    List backup records, newest first.

    Unreadable records are logged and skipped.
    """
    if backup_dir is None:
        backup_dir = get_backup_dir()

    if not backup_dir.is_dir():
        return []

    backups = []
    for record_path in sorted(backup_dir.glob(f"{BACKUP_FILE_PREFIX}*.json")):
        try:
            backups.append((record_path, load_backup(record_path)))
        except BackupError as e:
            logger.warning(str(e))

    backups.sort(key=lambda item: item[1].timestamp, reverse=True)
    return backups
