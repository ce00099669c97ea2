"""
Wire and exchange models for chat completions.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

import config


class ConversationTurn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatContext(BaseModel):
    """
    Free-text context produced by collaborator services.
    """

    model_config = ConfigDict(populate_by_name=True)

    weather: Optional[str] = None
    plant_health: Optional[str] = Field(default=None, alias="plantHealth")


class ChatRequest(BaseModel):
    messages: List[ConversationTurn]
    language: str = config.DEFAULT_LANGUAGE_CODE
    context: Optional[ChatContext] = None


class CompletionData(BaseModel):
    content: str
    model: str


class CompletionResult(BaseModel):
    success: bool
    data: Optional[CompletionData] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, content: str, model: str) -> "CompletionResult":
        return cls(success=True, data=CompletionData(content=content, model=model))

    @classmethod
    def fail(cls, error: str) -> "CompletionResult":
        return cls(success=False, error=error)


class CompletionRequest(BaseModel):
    """
    Upstream request body.

    reasoning_effort / wiki_grounding are opt-in by presence: they must be
    dumped with exclude_none=True so an unset field is absent, not null.
    """

    model: str
    messages: List[ConversationTurn]
    temperature: float
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    reasoning_effort: Optional[Literal["low", "medium", "high"]] = None
    wiki_grounding: Optional[bool] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
