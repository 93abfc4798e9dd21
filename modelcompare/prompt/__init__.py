"""Operator-facing prompts."""
from modelcompare.prompt.confirm import Confirm, console_confirm, upgrade_prompt

__all__ = ["Confirm", "console_confirm", "upgrade_prompt"]
