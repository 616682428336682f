"""Renders the changes between the backup and the freshly downloaded file."""

import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from claude_md_sync.utils.constants import DEFAULT_DIFF_EXECUTABLE


class DiffUnavailableError(Exception):
    """Raised when no diff tool can be run."""

    pass


class DiffRenderer(ABC):
    """Base ABC for diff renderers."""

    @abstractmethod
    def render(self, old_path: Path, new_path: Path) -> str:
        """Return a unified diff from old_path to new_path, or an empty string if they are identical.

        Raises:
            DiffUnavailableError: If no diff tool is available.
        """
        pass


class ShellDiffRenderer(DiffRenderer):
    """Diff renderer that shells out to 'diff -u'."""

    def __init__(self, executable: str = DEFAULT_DIFF_EXECUTABLE) -> None:
        self.executable = executable

    def render(self, old_path: Path, new_path: Path) -> str:
        if shutil.which(self.executable) is None:
            raise DiffUnavailableError(f"{self.executable} not found")
        result = subprocess.run(
            [self.executable, "-u", str(old_path), str(new_path)],
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
        # diff exits 0 for identical files, 1 when they differ and 2 on trouble.
        if result.returncode == 0:
            return ""
        if result.returncode == 1:
            return result.stdout
        raise subprocess.CalledProcessError(result.returncode, result.args, result.stdout, result.stderr)
