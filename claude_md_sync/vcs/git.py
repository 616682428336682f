"""Detects whether the working directory is inside a git working tree."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from claude_md_sync.utils.constants import DEFAULT_GIT_EXECUTABLE

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class RepoDetector(ABC):
    """Base ABC for repository detectors."""

    @abstractmethod
    def is_inside_repository(self, path: Path | None = None) -> bool:
        """Return whether the path (default: working directory) is inside a repository."""
        pass


class GitCliRepoDetector(RepoDetector):
    """Repository detector backed by 'git rev-parse --git-dir'."""

    def __init__(self, executable: str = DEFAULT_GIT_EXECUTABLE) -> None:
        self.executable = executable

    def is_inside_repository(self, path: Path | None = None) -> bool:
        cmd = [self.executable, "rev-parse", "--git-dir"]
        try:
            result = subprocess.run(cmd, cwd=path, capture_output=True, text=True, check=False)
        except OSError as exc:
            logger.debug("Unable to run git", command=" ".join(cmd), error=str(exc))
            return False
        if result.returncode == 0:
            logger.debug("Found git metadata directory", git_dir=result.stdout.strip())
        return result.returncode == 0
