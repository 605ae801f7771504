"""Terminal prompt used by the reconciliation walk."""
from __future__ import annotations

from typing import Callable, Sequence

import click

# (question, choices) -> selected choice
PromptFn = Callable[[str, Sequence[str]], str]


def click_prompt(question: str, choices: Sequence[str]) -> str:
    """Ask a closed-choice question on the terminal.

    The first choice is the default, so pressing enter picks it.

    Args:
        question: Question to display.
        choices: Allowed answer labels.

    Returns:
        The selected label, always one of ``choices``.
    """
    return click.prompt(
        question,
        type=click.Choice(list(choices)),
        default=choices[0],
        show_choices=True,
    )
