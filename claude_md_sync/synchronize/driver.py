"""Wires the sync workflow runner to its real capabilities."""

from claude_md_sync.configuration.models import SyncConfig
from claude_md_sync.github.adapter import GitHubKitContentsAdapter
from claude_md_sync.github.auth import GhCliAuthProvider
from claude_md_sync.synchronize.diff import ShellDiffRenderer
from claude_md_sync.synchronize.prompt import terminal_prompt
from claude_md_sync.synchronize.workflow_runner import SyncWorkflowRunner
from claude_md_sync.vcs.git import GitCliRepoDetector


def build_sync_workflow_runner(config: SyncConfig) -> SyncWorkflowRunner:
    """Build a runner that uses gh, git, diff, githubkit and the terminal."""
    return SyncWorkflowRunner(
        config=config,
        auth_provider=GhCliAuthProvider(config.gh_executable),
        repo_detector=GitCliRepoDetector(config.git_executable),
        downloader=GitHubKitContentsAdapter.create(config.github_api_url),
        diff_renderer=ShellDiffRenderer(config.diff_executable),
        prompt=terminal_prompt,
    )
