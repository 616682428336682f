"""Base ABCs for GitHub capabilities."""

from abc import ABC, abstractmethod

from claude_md_sync.synchronize.results import DownloadResult
from claude_md_sync.utils.github import ContentsRequest


class AuthProvider(ABC):
    """Base ABC for providers of GitHub credentials."""

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Return whether stored credentials are available."""
        pass

    @abstractmethod
    def login(self) -> bool:
        """Run an interactive login flow and return whether it succeeded."""
        pass

    @abstractmethod
    def get_token(self) -> str:
        """Export a fresh bearer token."""
        pass

    @abstractmethod
    def get_current_user(self) -> str:
        """Return the login of the authenticated user, or "unknown"."""
        pass


class ContentsDownloader(ABC):
    """Base ABC for clients that download raw repository file contents."""

    @abstractmethod
    async def download(self, request: ContentsRequest, token: str, remote_path: str) -> DownloadResult:
        """Download the raw bytes of a file from the contents endpoint."""
        pass
