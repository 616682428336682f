"""Fixtures for unit tests."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

from claude_md_sync.configuration.models import SyncConfig
from claude_md_sync.github.abc import AuthProvider, ContentsDownloader
from claude_md_sync.synchronize.diff import DiffRenderer
from claude_md_sync.synchronize.prompt import decline_prompt
from claude_md_sync.synchronize.results import DownloadResult
from claude_md_sync.synchronize.workflow_runner import SyncWorkflowRunner
from claude_md_sync.utils.github import ContentsRequest
from claude_md_sync.vcs.git import RepoDetector

FIXED_NOW = datetime(2025, 1, 2, 3, 4, 5)


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()
    # The CLI installs its own handlers on the root logger.
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)


class FakeAuthProvider(AuthProvider):
    """Auth provider with scripted answers."""

    def __init__(self, authenticated: bool = True, login_succeeds: bool = True, token: str = "test-token", user: str = "octocat") -> None:
        self.authenticated = authenticated
        self.login_succeeds = login_succeeds
        self.token = token
        self.user = user
        self.login_calls = 0
        self.token_calls = 0

    def is_authenticated(self) -> bool:
        return self.authenticated

    def login(self) -> bool:
        self.login_calls += 1
        return self.login_succeeds

    def get_token(self) -> str:
        self.token_calls += 1
        return self.token

    def get_current_user(self) -> str:
        return self.user


class FakeRepoDetector(RepoDetector):
    """Repository detector with a fixed answer."""

    def __init__(self, inside: bool = True) -> None:
        self.inside = inside

    def is_inside_repository(self, path: Path | None = None) -> bool:
        return self.inside


class FakeDownloader(ContentsDownloader):
    """Downloader that returns fixed content or raises a fixed error."""

    def __init__(self, content: bytes = b"# CLAUDE.md\n", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[tuple[ContentsRequest, str, str]] = []

    async def download(self, request: ContentsRequest, token: str, remote_path: str) -> DownloadResult:
        self.calls.append((request, token, remote_path))
        if self.error is not None:
            raise self.error
        return DownloadResult(content=self.content)


class FakeDiffRenderer(DiffRenderer):
    """Diff renderer that returns a fixed diff or raises a fixed error."""

    def __init__(self, diff: str = "", error: Exception | None = None) -> None:
        self.diff = diff
        self.error = error
        self.calls: list[tuple[Path, Path]] = []

    def render(self, old_path: Path, new_path: Path) -> str:
        self.calls.append((old_path, new_path))
        if self.error is not None:
            raise self.error
        return self.diff


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    """An authenticated fake auth provider."""
    return FakeAuthProvider()


@pytest.fixture
def repo_detector() -> FakeRepoDetector:
    """A fake repository detector that reports being inside a repository."""
    return FakeRepoDetector()


@pytest.fixture
def downloader() -> FakeDownloader:
    """A fake downloader returning a small CLAUDE.md."""
    return FakeDownloader()


@pytest.fixture
def diff_renderer() -> FakeDiffRenderer:
    """A fake diff renderer reporting identical files."""
    return FakeDiffRenderer()


@pytest.fixture
def make_runner(
    auth_provider: FakeAuthProvider,
    repo_detector: FakeRepoDetector,
    downloader: FakeDownloader,
    diff_renderer: FakeDiffRenderer,
) -> Callable[..., SyncWorkflowRunner]:
    """Factory for runners wired to the fake capabilities; keyword arguments override the defaults."""

    def _make_runner(**overrides: object) -> SyncWorkflowRunner:
        kwargs: dict[str, object] = {
            "config": SyncConfig(),
            "auth_provider": auth_provider,
            "repo_detector": repo_detector,
            "downloader": downloader,
            "diff_renderer": diff_renderer,
            "prompt": decline_prompt,
            "which": lambda executable: f"/usr/bin/{executable}",
            "now": lambda: FIXED_NOW,
            "echo": lambda message: None,
        }
        kwargs.update(overrides)
        return SyncWorkflowRunner(**kwargs)  # type: ignore[arg-type]

    return _make_runner
