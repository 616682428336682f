"""GitHub credentials provided by the GitHub CLI (gh)."""

import subprocess

import structlog

from claude_md_sync.configuration.exceptions import AuthenticationError
from claude_md_sync.utils.constants import DEFAULT_GH_EXECUTABLE

from .abc import AuthProvider

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GhCliAuthProvider(AuthProvider):
    """Authentication provider that shells out to the GitHub CLI."""

    def __init__(self, executable: str = DEFAULT_GH_EXECUTABLE) -> None:
        """Initialize the provider with the gh executable to run."""
        self.executable = executable

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        cmd = [self.executable, *args]
        logger.debug("Running GitHub CLI command", command=" ".join(cmd))
        return subprocess.run(cmd, capture_output=True, text=True, check=False)

    def is_authenticated(self) -> bool:
        """Return whether 'gh auth status' reports a logged-in account."""
        try:
            result = self._run("auth", "status")
        except OSError as exc:
            logger.debug("Unable to query GitHub CLI authentication status", error=str(exc))
            return False
        return result.returncode == 0

    def login(self) -> bool:
        """Run 'gh auth login --web' attached to the terminal so the user can complete it."""
        try:
            result = subprocess.run([self.executable, "auth", "login", "--web"], check=False)
        except OSError as exc:
            logger.debug("Unable to start GitHub CLI login", error=str(exc))
            return False
        return result.returncode == 0

    def get_token(self) -> str:
        """Export a fresh token with 'gh auth token'.

        Raises:
            AuthenticationError: If gh cannot export a token.
        """
        try:
            result = self._run("auth", "token")
        except OSError as exc:
            raise AuthenticationError(f"Unable to run GitHub CLI to export a token: {exc}") from exc
        token = result.stdout.strip()
        if result.returncode != 0 or not token:
            raise AuthenticationError(f"GitHub CLI could not export an authentication token: {result.stderr.strip() or 'no token returned'}")
        return token

    def get_current_user(self) -> str:
        """Return the authenticated login, or "unknown" when the lookup fails."""
        try:
            result = self._run("api", "user", "--jq", ".login")
        except OSError:
            return "unknown"
        login = result.stdout.strip()
        if result.returncode != 0 or not login:
            return "unknown"
        return login
