"""
query_classifier.py

Maps a farmer's latest question to a generation policy.

Scope:
- Pattern based, no LLM call
- Categories are tested in a FIXED priority order, first match wins
- Every input gets a policy (default = conversational)

The order is part of the contract. Time-sensitive and safety intents
(dateTime, emergency) come first, then the agronomy-specific ones, and
only then the broad reasoning/factual buckets that would otherwise swallow
"what / why / best" questions.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Literal, Mapping, Pattern, Tuple

from pydantic import BaseModel, ConfigDict, Field

from nlp.patterns import COMPILED_PATTERNS, IntentCategory

logger = logging.getLogger(__name__)


class GenerationPolicy(BaseModel):
    """
    Sampling / reasoning knobs sent upstream for one request.
    """

    model_config = ConfigDict(frozen=True)

    needs_thinking: bool
    needs_wiki_grounding: bool
    reasoning_effort: Literal["low", "medium", "high"]
    temperature: float = Field(ge=0.0, le=1.0)
    top_p: float = Field(ge=0.0, le=1.0)
    max_tokens: int = Field(gt=0)


# ============================================================
# POLICY TABLE
# ============================================================

POLICIES: Mapping[IntentCategory, GenerationPolicy] = MappingProxyType({
    # current information, keep it tight
    IntentCategory.DATE_TIME: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="medium",
        temperature=0.2, top_p=0.7, max_tokens=1700,
    ),
    # focused and actionable
    IntentCategory.EMERGENCY: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="high",
        temperature=0.2, top_p=0.7, max_tokens=1700,
    ),
    # diagnosis + treatment, verified via wiki
    IntentCategory.DISEASE: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=True, reasoning_effort="high",
        temperature=0.3, top_p=0.8, max_tokens=2000,
    ),
    IntentCategory.CALCULATION: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="high",
        temperature=0.1, top_p=0.6, max_tokens=2000,
    ),
    IntentCategory.SCHEME: GenerationPolicy(
        needs_thinking=False, needs_wiki_grounding=True, reasoning_effort="low",
        temperature=0.2, top_p=0.8, max_tokens=1900,
    ),
    IntentCategory.MARKET: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="medium",
        temperature=0.4, top_p=0.8, max_tokens=700,
    ),
    IntentCategory.REASONING: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="medium",
        temperature=0.5, top_p=0.9, max_tokens=1800,
    ),
    IntentCategory.FACTUAL: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=True, reasoning_effort="medium",
        temperature=0.3, top_p=0.85, max_tokens=1800,
    ),
    IntentCategory.SEASONAL: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="medium",
        temperature=0.4, top_p=0.85, max_tokens=1750,
    ),
    IntentCategory.IRRIGATION: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=False, reasoning_effort="medium",
        temperature=0.4, top_p=0.85, max_tokens=1750,
    ),
    # NPK ratios, soil science
    IntentCategory.SOIL: GenerationPolicy(
        needs_thinking=True, needs_wiki_grounding=True, reasoning_effort="medium",
        temperature=0.35, top_p=0.8, max_tokens=1800,
    ),
    # conversational
    IntentCategory.DEFAULT: GenerationPolicy(
        needs_thinking=False, needs_wiki_grounding=False, reasoning_effort="low",
        temperature=0.6, top_p=0.9, max_tokens=1000,
    ),
})

DEFAULT_POLICY = POLICIES[IntentCategory.DEFAULT]


# ============================================================
# PRIORITY ORDER
# ============================================================

PRIORITY_ORDER: Tuple[IntentCategory, ...] = (
    IntentCategory.DATE_TIME,
    IntentCategory.EMERGENCY,
    IntentCategory.DISEASE,
    IntentCategory.CALCULATION,
    IntentCategory.SCHEME,
    IntentCategory.MARKET,
    IntentCategory.REASONING,
    IntentCategory.FACTUAL,
    IntentCategory.SEASONAL,
    IntentCategory.IRRIGATION,
    IntentCategory.SOIL,
)

_RULES: Tuple[Tuple[IntentCategory, Tuple[Pattern[str], ...]], ...] = tuple(
    (category, COMPILED_PATTERNS[category]) for category in PRIORITY_ORDER
)


# ============================================================
# PUBLIC API
# ============================================================

def detect_category(query_text: str) -> IntentCategory:
    query = (query_text or "").lower()
    if not query.strip():
        return IntentCategory.DEFAULT

    for category, matchers in _RULES:
        if any(m.search(query) for m in matchers):
            return category

    return IntentCategory.DEFAULT


def classify(query_text: str) -> GenerationPolicy:
    """
    Generation policy for a single user query.

    Pure function of the text: same input, same policy.
    """
    category = detect_category(query_text)
    logger.debug("🧭 Query classified as %s", category.value)
    return POLICIES[category]


def latest_user_query(turns: Iterable) -> str:
    """
    Text of the most recent user turn, or "" when there is none.

    Accepts ConversationTurn models or plain {"role", "content"} dicts.
    """
    for turn in reversed(list(turns)):
        role = turn.get("role") if isinstance(turn, dict) else turn.role
        if role == "user":
            content = turn.get("content") if isinstance(turn, dict) else turn.content
            return content or ""
    return ""
