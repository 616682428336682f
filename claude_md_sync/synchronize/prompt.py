"""Yes/no prompt capability used when deciding whether to keep the backup."""

from typing import Callable

import typer

from claude_md_sync.utils.constants import AFFIRMATIVE_ANSWERS

Prompt = Callable[[str], bool]


def is_affirmative(answer: str) -> bool:
    """Return whether an answer is 'y' or 'yes', ignoring case and surrounding whitespace."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def terminal_prompt(question: str) -> bool:
    """Ask a question on the terminal; only an explicit yes counts, and EOF counts as no."""
    try:
        answer = typer.prompt(f"{question} (y/N)", default="", show_default=False)
    except typer.Abort:
        return False
    return is_affirmative(answer)


def decline_prompt(question: str) -> bool:
    """Answer no without asking."""
    return False
