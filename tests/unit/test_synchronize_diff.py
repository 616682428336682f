"""Unit tests for the diff renderer."""

import shutil
import subprocess
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from claude_md_sync.synchronize.diff import DiffUnavailableError, ShellDiffRenderer

requires_diff = pytest.mark.skipif(shutil.which("diff") is None, reason="diff executable not available")


def test_missing_diff_tool(tmp_path: Path) -> None:
    """Test that a missing diff executable is reported as unavailable."""
    renderer = ShellDiffRenderer(executable="definitely-not-a-diff-tool")

    with pytest.raises(DiffUnavailableError):
        renderer.render(tmp_path / "a", tmp_path / "b")


@requires_diff
def test_identical_files(tmp_path: Path) -> None:
    """Test that identical files produce an empty diff."""
    (tmp_path / "a").write_text("same\n")
    (tmp_path / "b").write_text("same\n")

    assert ShellDiffRenderer().render(tmp_path / "a", tmp_path / "b") == ""


@requires_diff
def test_different_files(tmp_path: Path) -> None:
    """Test that differing files produce a unified diff."""
    (tmp_path / "a").write_text("OLD\n")
    (tmp_path / "b").write_text("NEW\n")

    diff = ShellDiffRenderer().render(tmp_path / "a", tmp_path / "b")

    assert "-OLD" in diff
    assert "+NEW" in diff


def test_diff_trouble_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that diff exit status 2 is raised as a CalledProcessError."""
    monkeypatch.setattr(shutil, "which", lambda name: "/usr/bin/diff")

    def fake_run(cmd: list[str], **kwargs: Any) -> SimpleNamespace:
        return SimpleNamespace(returncode=2, args=cmd, stdout="", stderr="No such file")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(subprocess.CalledProcessError):
        ShellDiffRenderer().render(tmp_path / "missing", tmp_path / "b")
