"""Unit tests for the yes/no prompt capability."""

from typing import Any

import pytest
import typer

from claude_md_sync.synchronize.prompt import decline_prompt, is_affirmative, terminal_prompt


@pytest.mark.parametrize(
    "answer,expected",
    [
        ("y", True),
        ("Y", True),
        ("yes", True),
        (" YES ", True),
        ("", False),
        ("n", False),
        ("N", False),
        ("no", False),
        ("yep", False),
        ("sure", False),
    ],
)
def test_is_affirmative(answer: str, expected: bool) -> None:
    """Test that only y/yes count as agreement."""
    assert is_affirmative(answer) is expected


def test_terminal_prompt_asks_question(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the question is shown with the (y/N) hint and the answer is interpreted."""
    asked: list[str] = []

    def fake_prompt(text: str, **kwargs: Any) -> str:
        asked.append(text)
        return "y"

    monkeypatch.setattr(typer, "prompt", fake_prompt)

    assert terminal_prompt("Keep backup file CLAUDE.md.backup.20250101_000000?") is True
    assert asked == ["Keep backup file CLAUDE.md.backup.20250101_000000? (y/N)"]


def test_terminal_prompt_treats_abort_as_no(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that closed input counts as declining."""

    def aborting_prompt(text: str, **kwargs: Any) -> str:
        raise typer.Abort()

    monkeypatch.setattr(typer, "prompt", aborting_prompt)

    assert terminal_prompt("Keep backup file?") is False


def test_decline_prompt() -> None:
    """Test that the non-interactive prompt always declines."""
    assert decline_prompt("Keep backup file?") is False
