# This file is intended to orchestrate a single file synchronization run.

"""Orchestrates the synchronization of a file from a GitHub repository."""

import os
import shutil
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Callable

import structlog
import typer

from claude_md_sync.configuration.exceptions import AuthenticationError, DownloadError, EmptyDownloadError, NotARepositoryError, SyncError
from claude_md_sync.configuration.models import SyncConfig
from claude_md_sync.github.abc import AuthProvider, ContentsDownloader
from claude_md_sync.schemas.sync import SyncRequest
from claude_md_sync.synchronize.backup import BackupRecord, create_backup, discard_backup, restore_backup
from claude_md_sync.synchronize.dependencies import Which, check_dependencies
from claude_md_sync.synchronize.diff import DiffRenderer, DiffUnavailableError
from claude_md_sync.synchronize.prompt import Prompt, decline_prompt
from claude_md_sync.synchronize.results import SyncResult
from claude_md_sync.utils.constants import PARTIAL_DOWNLOAD_SUFFIX
from claude_md_sync.utils.github import build_contents_request
from claude_md_sync.vcs.git import RepoDetector

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SyncWorkflowRunner:
    """Runs the steps of a sync: pre-flight checks, authentication, backup, download, verification, diff and cleanup.

    Every external capability is injected so the runner never spawns processes
    or talks to the network itself. Steps up to and including the download
    raise a SyncError subclass and abort the run; later steps only log.
    """

    def __init__(
        self,
        config: SyncConfig,
        auth_provider: AuthProvider,
        repo_detector: RepoDetector,
        downloader: ContentsDownloader,
        diff_renderer: DiffRenderer,
        prompt: Prompt = decline_prompt,
        which: Which = shutil.which,
        now: Callable[[], datetime] = datetime.now,
        echo: Callable[[str], None] = typer.echo,
    ) -> None:
        """Initialize the runner with its configuration and capabilities."""
        self.config = config
        self.auth_provider = auth_provider
        self.repo_detector = repo_detector
        self.downloader = downloader
        self.diff_renderer = diff_renderer
        self.prompt = prompt
        self.which = which
        self.now = now
        self.echo = echo

    async def run(self, request: SyncRequest) -> SyncResult:
        """Synchronize the requested file and return a summary of the run."""
        local_path = Path(request.local_path)
        started_at = self.now()
        logger.info(f"Starting {local_path} update from {request.repository} (branch: {request.branch})...")

        check_dependencies(self.config.required_executables, which=self.which)
        self.ensure_repository()
        self.ensure_authenticated()

        backup = create_backup(local_path, started_at)
        if backup is None:
            logger.warning(f"No existing {local_path} found to backup")

        byte_length = await self.download(request, local_path, backup)
        line_count, marker_found = self.verify(local_path)
        if backup is not None:
            self.show_changes(backup)

        logger.info(f"Successfully updated {local_path}")
        logger.info("Please review the changes and commit if appropriate")

        backup_retained = self.cleanup(backup) if backup is not None else False
        return SyncResult(
            local_path=local_path,
            byte_length=byte_length,
            line_count=line_count,
            marker_found=marker_found,
            backup=backup,
            backup_retained=backup_retained,
        )

    def ensure_repository(self) -> None:
        """Raise NotARepositoryError unless the working directory is inside a git working tree."""
        if not self.repo_detector.is_inside_repository():
            raise NotARepositoryError("Not in a git repository. Please run this command from the project root.")

    def ensure_authenticated(self) -> None:
        """Make sure the GitHub CLI holds credentials, logging in through the browser if needed."""
        if self.auth_provider.is_authenticated():
            logger.info(f"GitHub CLI authenticated as: {self.auth_provider.get_current_user()}")
            return

        logger.warning("GitHub CLI not authenticated.")
        logger.info("Setting up GitHub CLI authentication...")
        if not self.auth_provider.login():
            raise AuthenticationError("GitHub CLI authentication failed")
        logger.info("GitHub CLI authentication successful!")

    async def download(self, request: SyncRequest, local_path: Path, backup: BackupRecord | None) -> int:
        """Download the remote file onto local_path and return the number of bytes written.

        Nothing is written unless the GET succeeded with a non-empty body. On any
        failure the backup, if one exists, is moved back onto local_path before
        the error propagates.
        """
        contents_request = build_contents_request(request, self.config.github_api_url)
        logger.info(f"Downloading {request.remote_path} from GitHub API (branch: {request.branch})...")
        try:
            token = self.auth_provider.get_token()
            result = await self.downloader.download(contents_request, token, request.remote_path)
            if result.byte_length == 0:
                raise EmptyDownloadError(request.remote_path)
            self.write_local_file(local_path, result.content, request.remote_path)
        except SyncError:
            if backup is not None:
                restore_backup(backup)
            raise
        logger.info("File downloaded successfully", bytes=result.byte_length)
        return result.byte_length

    @staticmethod
    def write_local_file(local_path: Path, content: bytes, remote_path: str) -> None:
        """Write content to a sibling file and move it onto local_path, so local_path is never left half-written."""
        partial_path = local_path.with_name(local_path.name + PARTIAL_DOWNLOAD_SUFFIX)
        try:
            partial_path.write_bytes(content)
            os.replace(partial_path, local_path)
        except OSError as exc:
            partial_path.unlink(missing_ok=True)
            raise DownloadError(remote_path, f"unable to write {local_path}: {exc}") from exc

    def verify(self, local_path: Path) -> tuple[int, bool]:
        """Check the downloaded file for the expected marker and count its lines."""
        try:
            content = local_path.read_bytes()
        except OSError as exc:
            logger.warning("Unable to verify downloaded file", local_path=str(local_path), error=str(exc))
            return 0, False
        marker_found = self.config.expected_marker.encode("utf-8") in content
        if not marker_found:
            logger.warning(
                f"Downloaded file may not be a valid {local_path.name} (missing expected marker)",
                expected_marker=self.config.expected_marker,
            )
        line_count = content.count(b"\n")
        logger.info(f"Downloaded file has {line_count} lines")
        return line_count, marker_found

    def show_changes(self, backup: BackupRecord) -> None:
        """Print a unified diff between the backup and the new file; never fails the run."""
        try:
            diff = self.diff_renderer.render(backup.path, backup.source_path)
        except DiffUnavailableError as exc:
            logger.info("No diff tool available, skipping change display", reason=str(exc))
            return
        except (OSError, subprocess.SubprocessError) as exc:
            logger.warning("Unable to display changes", error=str(exc))
            return

        if not diff:
            logger.info("No differences found")
            return
        logger.info("Changes made:")
        self.echo(diff.rstrip("\n"))
        logger.info("Differences shown above")

    def cleanup(self, backup: BackupRecord) -> bool:
        """Ask whether to keep the backup, delete it unless the answer is yes, and return whether it was kept."""
        if self.config.keep_backup:
            keep = True
        elif self.config.interactive:
            keep = self.prompt(f"Keep backup file {backup.path}?")
        else:
            keep = False

        if keep:
            logger.info(f"Backup file kept: {backup.path}")
            return True
        try:
            discard_backup(backup)
        except OSError as exc:
            logger.warning(f"Unable to remove backup file {backup.path}", error=str(exc))
            return True
        logger.info("Backup file removed")
        return False
