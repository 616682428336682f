"""Creates, restores and discards timestamped backups of the local file."""

import os
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog

from claude_md_sync.configuration.exceptions import BackupError
from claude_md_sync.utils.constants import BACKUP_SUFFIX, BACKUP_TIMESTAMP_FORMAT

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BackupRecord:
    """A copy of the local file taken before it is overwritten."""

    path: Path
    created_at: datetime
    source_path: Path


def backup_path_for(local_path: Path, created_at: datetime) -> Path:
    """Return the backup path of a local file, e.g. CLAUDE.md.backup.20250101_120000."""
    return Path(f"{local_path}{BACKUP_SUFFIX}{created_at.strftime(BACKUP_TIMESTAMP_FORMAT)}")


def create_backup(local_path: Path, created_at: datetime) -> BackupRecord | None:
    """Copy an existing local file to its backup path.

    Returns None when there is nothing to back up. Raises BackupError when the
    copy fails; the original file is left untouched in that case.
    """
    if not local_path.is_file():
        return None
    record = BackupRecord(path=backup_path_for(local_path, created_at), created_at=created_at, source_path=local_path)
    logger.info(f"Creating backup: {record.path}", local_path=str(local_path))
    try:
        shutil.copy2(local_path, record.path)
    except OSError as exc:
        raise BackupError(f"Failed to create backup of existing {local_path}: {exc}") from exc
    return record


def restore_backup(record: BackupRecord) -> None:
    """Move a backup back onto its source path, consuming the backup."""
    logger.info("Restoring backup...", backup_path=str(record.path), local_path=str(record.source_path))
    os.replace(record.path, record.source_path)


def discard_backup(record: BackupRecord) -> None:
    """Delete a backup file if it still exists."""
    record.path.unlink(missing_ok=True)
