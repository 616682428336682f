"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import signal
import sys
from contextlib import contextmanager
from types import FrameType
from typing import Iterator

import structlog
import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer import Argument, Option
from typing_extensions import Annotated

from claude_md_sync.configuration.env import Settings
from claude_md_sync.configuration.exceptions import SyncError
from claude_md_sync.configuration.reconcile import reconcile_sync_configuration
from claude_md_sync.schemas.sync import SyncRequest
from claude_md_sync.synchronize.driver import build_sync_workflow_runner
from claude_md_sync.utils.constants import DEFAULT_LOCAL_PATH, DEFAULT_REMOTE_PATH, HELP_FLAGS
from claude_md_sync.utils.logging import configure_logging

load_dotenv()

PROG_NAME = "claude-md-sync"

USAGE = f"""\
Usage: {PROG_NAME} <repo_owner> <repo_name> <branch> [remote_file_path] [local_file_path]

Update a file (by default CLAUDE.md) from a template repository using the GitHub CLI.

Parameters:
  repo_owner        - GitHub repository owner (required)
  repo_name         - GitHub repository name (required)
  branch            - Branch to sync from (required)
  remote_file_path  - Path to file in source repo (optional, default: {DEFAULT_REMOTE_PATH})
  local_file_path   - Local destination file (optional, default: {DEFAULT_LOCAL_PATH})

Options:
  --expected-marker TEXT  Text the downloaded file is expected to contain [env: EXPECTED_MARKER]
  --github-api-url URL    GitHub API URL [env: GITHUB_API_URL]
  --keep-backup           Keep the backup file without asking
  --no-input              Never prompt; the backup file is removed
  --debug                 Enable debug logging [env: DEBUG]
  -h, --help              Show this message and exit

Prerequisites:
  - git must be installed
  - GitHub CLI (gh) must be installed
  - Authentication via 'gh auth login'

Examples:
  {PROG_NAME} rknuus idesign_project_template main
  {PROG_NAME} rknuus idesign_project_template main CLAUDE.md CLAUDE.md
  {PROG_NAME} myorg my_template develop docs/CLAUDE.md CLAUDE.md
  gh auth login   # Setup authentication first if needed
"""

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)


def show_usage_callback(value: bool) -> None:
    """Print the usage text and exit successfully when a help flag is given."""
    if value:
        typer.echo(USAGE)
        raise typer.Exit(0)


def raise_keyboard_interrupt(signum: int, frame: FrameType | None) -> None:
    """Signal handler that turns a termination request into a KeyboardInterrupt."""
    raise KeyboardInterrupt


@contextmanager
def terminate_as_interrupt() -> Iterator[None]:
    """Handle SIGTERM like Ctrl-C while the sync runs, restoring the previous handler afterwards."""
    previous = signal.signal(signal.SIGTERM, raise_keyboard_interrupt)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


# Help is handled by the eager -h/--help option below. Extra positional arguments are ignored.
@typer_app.command(context_settings={"help_option_names": [], "allow_extra_args": True})
def sync_cli(
    ctx: typer.Context,
    repo_owner: Annotated[str | None, Argument(help="GitHub repository owner.", show_default=False)] = None,
    repo_name: Annotated[str | None, Argument(help="GitHub repository name.", show_default=False)] = None,
    branch: Annotated[str | None, Argument(help="Branch to sync from.", show_default=False)] = None,
    remote_path: Annotated[str, Argument(help="Path to the file in the source repository.")] = DEFAULT_REMOTE_PATH,
    local_path: Annotated[str, Argument(help="Local destination file.")] = DEFAULT_LOCAL_PATH,
    expected_marker: Annotated[str | None, Option(envvar="EXPECTED_MARKER", help="Text the downloaded file is expected to contain.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    keep_backup: Annotated[bool, Option("--keep-backup", help="Keep the backup file without asking.")] = False,
    no_input: Annotated[bool, Option("--no-input", help="Never prompt; the backup file is removed.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
    help_: Annotated[
        bool,
        Option("-h", "--help", is_eager=True, expose_value=False, callback=show_usage_callback, help="Show this message and exit."),
    ] = False,
) -> None:
    """Fetch a file from a GitHub repository branch, replacing the local copy."""
    if repo_owner is None or repo_name is None or branch is None:
        typer.echo("Error: Missing required parameters")
        typer.echo(USAGE)
        raise typer.Exit(1)

    settings = Settings()
    config = reconcile_sync_configuration(
        settings,
        cli_debug=debug or None,
        cli_github_api_url=github_api_url,
        cli_expected_marker=expected_marker,
        cli_keep_backup=keep_backup,
        cli_no_input=no_input,
    )
    configure_logging(debug=config.debug)
    if ctx.args:
        logger.debug("Ignoring extra arguments", extra_args=ctx.args)

    try:
        request = SyncRequest(
            repo_owner=repo_owner,
            repo_name=repo_name,
            branch=branch,
            remote_path=remote_path,
            local_path=local_path,
        )
    except ValidationError as exc:
        typer.echo(f"Error: Invalid parameters: {exc}")
        typer.echo(USAGE)
        raise typer.Exit(1) from exc

    runner = build_sync_workflow_runner(config)

    try:
        with terminate_as_interrupt():
            asyncio.run(runner.run(request))
    except SyncError as exc:
        logger.error(str(exc))
        raise typer.Exit(1) from exc
    except KeyboardInterrupt as exc:
        logger.error("Sync interrupted or failed")
        raise typer.Exit(1) from exc
    except Exception:
        logger.exception("Sync interrupted or failed")
        raise


def help_requested(args: list[str]) -> bool:
    """Return whether a help flag appears anywhere among the arguments."""
    return any(arg in HELP_FLAGS for arg in args)


def main() -> None:
    """Console script entry point."""
    # Help wins over every other argument, even ones the parser would reject.
    if help_requested(sys.argv[1:]):
        typer.echo(USAGE)
        sys.exit(0)
    typer_app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
