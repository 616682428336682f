"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass

from claude_md_sync.utils.constants import (
    DEFAULT_DIFF_EXECUTABLE,
    DEFAULT_EXPECTED_MARKER,
    DEFAULT_GH_EXECUTABLE,
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_GITHUB_API_URL,
)


@dataclass(frozen=True)
class SyncConfig:
    """Configuration of a single synchronization run."""

    debug: bool = False
    github_api_url: str = DEFAULT_GITHUB_API_URL
    expected_marker: str = DEFAULT_EXPECTED_MARKER
    gh_executable: str = DEFAULT_GH_EXECUTABLE
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    diff_executable: str = DEFAULT_DIFF_EXECUTABLE
    interactive: bool = True
    keep_backup: bool = False

    @property
    def required_executables(self) -> tuple[str, ...]:
        """Executables that must be resolvable before anything else runs."""
        return (self.gh_executable, self.git_executable)
