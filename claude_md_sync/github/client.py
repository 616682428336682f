# This file is intended to hold the setup for the githubkit client.

"""Sets up the githubkit client used for raw content downloads."""

from githubkit import GitHub, UnauthAuthStrategy

from claude_md_sync.utils.constants import DEFAULT_GITHUB_API_URL


def get_github_client(github_api_url: str = DEFAULT_GITHUB_API_URL) -> GitHub[UnauthAuthStrategy]:
    """Returns a githubkit client for the given API URL.

    The client carries no credentials of its own. The bearer token travels in
    the explicit header map of each contents request, so a token is only ever
    taken fresh from the GitHub CLI and never persisted in the client.
    Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    # Disable HTTP caching to always get fresh data
    return GitHub(UnauthAuthStrategy(), base_url=github_api_url, http_cache=False)
