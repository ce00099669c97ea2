"""
NLP package.

Deterministic text handling: intent patterns, query classification,
language names, and response parsing.
"""

from nlp.query_classifier import GenerationPolicy, classify, detect_category

__all__ = [
    "GenerationPolicy",
    "classify",
    "detect_category",
]
