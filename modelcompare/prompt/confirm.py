"""Operator confirmation port.

Every operator decision goes through a :data:`Confirm` callable: it receives
the full question text and answers ``True`` (yes) or ``False`` (no or
dismissed).  :func:`console_confirm` backs it with a terminal prompt; tests
pass a scripted callable instead.
"""
from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.prompt import Confirm as RichConfirm

#: ``confirm(question) -> bool``
Confirm = Callable[[str], bool]

UPGRADE_PROMPT = (
    "Source compatibility level is {source} and target is {target}, which is "
    "not supported for comparison. Do you want to upgrade the target to {source}?"
)


def upgrade_prompt(source_level: int, target_level: int) -> str:
    """Return the target-upgrade question for the given levels."""
    return UPGRADE_PROMPT.format(source=source_level, target=target_level)


def console_confirm(question: str, console: Console | None = None) -> bool:
    """Ask ``question`` on the terminal; anything but yes counts as no.

    A dismissed prompt (end of input) is a no.
    """
    try:
        return RichConfirm.ask(question, console=console, default=False)
    except EOFError:
        return False
