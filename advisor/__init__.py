"""
Advisor package.

Builds the system prompt around a farmer's conversation and runs
one classified chat turn against the completion provider.
"""

from advisor.pipeline import get_chat_completion
from advisor.prompt_builder import PromptBuilder, assemble

__all__ = [
    "PromptBuilder",
    "assemble",
    "get_chat_completion",
]
