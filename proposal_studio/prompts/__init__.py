"""Prompt text used for proposal generation."""

from .proposal_prompts import SYSTEM_INSTRUCTION, DEFAULT_PROMPT_TEMPLATE

__all__ = ["SYSTEM_INSTRUCTION", "DEFAULT_PROMPT_TEMPLATE"]
