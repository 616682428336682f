"""Contains results of application execution."""

from dataclasses import dataclass
from pathlib import Path

from claude_md_sync.synchronize.backup import BackupRecord


@dataclass(frozen=True)
class DownloadResult:
    """Raw bytes returned by the contents endpoint."""

    content: bytes

    @property
    def byte_length(self) -> int:
        return len(self.content)


@dataclass
class SyncResult:
    """Contains results of a completed synchronization run."""

    local_path: Path
    byte_length: int
    line_count: int
    marker_found: bool
    backup: BackupRecord | None = None
    backup_retained: bool = False
