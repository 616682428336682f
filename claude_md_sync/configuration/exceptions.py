"""Contains exceptions raised while synchronizing a file from GitHub."""


class SyncError(Exception):
    """Base class for failures that abort a synchronization run."""

    pass


class DependencyMissingError(SyncError):
    """Raised when a required executable cannot be found on the search path."""

    def __init__(self, executable: str, hints: list[str] | None = None) -> None:
        """Initializes the exception with the missing executable and optional install hints."""
        message = f"{executable} is required but not found."
        if hints:
            message += " Please install it: " + "; ".join(hints)
        super().__init__(message)
        self.executable = executable
        self.hints = hints or []


class NotARepositoryError(SyncError):
    """Raised when the working directory is not inside a git working tree."""

    pass


class AuthenticationError(SyncError):
    """Raised when the GitHub CLI cannot authenticate or export a token."""

    pass


class BackupError(SyncError):
    """Raised when an existing local file cannot be backed up."""

    pass


class DownloadError(SyncError):
    """Raised when the remote file cannot be downloaded."""

    def __init__(self, remote_path: str, reason: str, status_code: int | None = None) -> None:
        """Initializes the exception with the remote path, the reason and the HTTP status if any."""
        super().__init__(f"Failed to download {remote_path} from GitHub API: {reason}")
        self.remote_path = remote_path
        self.reason = reason
        self.status_code = status_code


class EmptyDownloadError(DownloadError):
    """Raised when the remote file was downloaded successfully but has no content."""

    def __init__(self, remote_path: str) -> None:
        """Initializes the exception with the remote path."""
        super().__init__(remote_path, "downloaded file is empty")
