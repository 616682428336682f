"""Contains utility functions for GitHub interactions."""

from dataclasses import dataclass
from urllib.parse import quote, urlencode

from claude_md_sync.schemas.sync import SyncRequest
from claude_md_sync.utils.constants import CONTENTS_PATH_TEMPLATE, DEFAULT_GITHUB_API_URL, RAW_CONTENT_MEDIA_TYPE


@dataclass(frozen=True)
class ContentsRequest:
    """A GET request against the raw variant of the repository contents endpoint."""

    github_api_url: str
    path: str
    params: dict[str, str]

    @property
    def url(self) -> str:
        """The absolute URL of the request, query string included."""
        return f"{self.github_api_url.rstrip('/')}{self.path}?{urlencode(self.params)}"

    def headers(self, token: str) -> dict[str, str]:
        """Return the header map carrying the bearer token and the raw media type."""
        return {
            "Authorization": f"token {token}",
            "Accept": RAW_CONTENT_MEDIA_TYPE,
        }


def build_contents_path(owner: str, repo: str, remote_path: str) -> str:
    """Fill the contents endpoint template, quoting every segment but keeping the slashes of the file path."""
    return CONTENTS_PATH_TEMPLATE.format(
        owner=quote(owner, safe=""),
        repo=quote(repo, safe=""),
        path=quote(remote_path.strip("/"), safe="/"),
    )


def build_contents_request(request: SyncRequest, github_api_url: str = DEFAULT_GITHUB_API_URL) -> ContentsRequest:
    """Build the contents request for the file and branch described by a sync request."""
    return ContentsRequest(
        github_api_url=github_api_url,
        path=build_contents_path(request.repo_owner, request.repo_name, request.remote_path),
        params={"ref": request.branch},
    )
