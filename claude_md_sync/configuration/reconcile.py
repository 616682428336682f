"""Reconciles configuration between CLI arguments and environment variables."""

from claude_md_sync.configuration.env import Settings
from claude_md_sync.configuration.models import SyncConfig


def reconcile_sync_configuration(
    settings: Settings,
    cli_debug: bool | None = None,
    cli_github_api_url: str | None = None,
    cli_expected_marker: str | None = None,
    cli_keep_backup: bool = False,
    cli_no_input: bool = False,
) -> SyncConfig:
    """Reconciles CLI options with environment settings into a sync configuration.

    Args:
        settings (Settings): Settings loaded from the environment and .env file.
        cli_debug (bool | None): Debug flag from the command line, if given.
        cli_github_api_url (str | None): GitHub API URL from the command line, if given.
        cli_expected_marker (str | None): Marker expected in the downloaded file, if given.
        cli_keep_backup (bool): Keep the backup file without prompting.
        cli_no_input (bool): Never prompt; the backup is removed unless cli_keep_backup is set.

    Returns:
        SyncConfig: The configuration for the synchronization run. Command line
            values take precedence over environment settings.
    """
    return SyncConfig(
        debug=cli_debug if cli_debug is not None else settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        expected_marker=cli_expected_marker or settings.EXPECTED_MARKER,
        gh_executable=settings.GH_EXECUTABLE,
        git_executable=settings.GIT_EXECUTABLE,
        diff_executable=settings.DIFF_EXECUTABLE,
        interactive=not (cli_no_input or cli_keep_backup),
        keep_backup=cli_keep_backup,
    )
