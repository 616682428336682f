"""GitHub contents adapter for the githubkit library."""

from typing import Self

import structlog
from githubkit import GitHub, Response
from githubkit.exception import GitHubException, RequestFailed

from claude_md_sync.configuration.exceptions import DownloadError
from claude_md_sync.synchronize.results import DownloadResult
from claude_md_sync.utils.constants import DEFAULT_GITHUB_API_URL
from claude_md_sync.utils.github import ContentsRequest

from .abc import ContentsDownloader
from .client import get_github_client

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GitHubKitContentsAdapter(ContentsDownloader):
    """Downloads raw file contents through the githubkit library."""

    def __init__(self, client: GitHub) -> None:
        """Initialize the adapter with an already-initialized client."""
        self.client = client

    @classmethod
    def create(cls, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new contents adapter for a GitHub instance."""
        logger.debug("Creating client for GitHub instance", github_api_url=github_api_url)
        return cls(get_github_client(github_api_url))

    async def download(self, request: ContentsRequest, token: str, remote_path: str) -> DownloadResult:
        """Download the raw bytes of a file, failing on any non-2xx status.

        Raises:
            DownloadError: If the request fails or GitHub answers with an error status.
        """
        logger.debug("Requesting raw file contents", url=request.url)
        try:
            response: Response = await self.client.arequest(
                "GET",
                request.path,
                params=request.params,
                headers=request.headers(token),
            )
        except RequestFailed as exc:
            status_code = exc.response.status_code
            logger.debug("GitHub rejected contents request", url=request.url, status_code=status_code)
            raise DownloadError(remote_path, f"HTTP {status_code}", status_code=status_code) from exc
        except GitHubException as exc:
            raise DownloadError(remote_path, str(exc) or type(exc).__name__) from exc

        if not 200 <= response.status_code < 300:
            raise DownloadError(remote_path, f"HTTP {response.status_code}", status_code=response.status_code)
        return DownloadResult(content=response.content)
