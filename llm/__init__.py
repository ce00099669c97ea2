"""
LLM package.

Wraps the Sarvam chat-completion API and its request/response models.
"""

from llm.sarvam_client import SarvamChatClient
from llm.schemas import CompletionResult, ConversationTurn

__all__ = [
    "CompletionResult",
    "ConversationTurn",
    "SarvamChatClient",
]
