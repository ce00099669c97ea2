"""
response_parser.py

Sarvam-M returns its reasoning inline, wrapped in <think>...</think>.
The farmer only sees (and hears) the answer; the reasoning is kept aside.
"""

import re
from typing import Tuple

_COMPLETE_THINK = re.compile(r"<think>([\s\S]*?)</think>", re.IGNORECASE)
_OPEN_THINK = re.compile(r"<think>([\s\S]*)$", re.IGNORECASE)


def split_thinking(text: str) -> Tuple[str, str]:
    """
    Returns (thinking, answer).

    - every complete <think> block is collected, in order
    - an unterminated trailing <think> (token budget ran out) counts as
      thinking too
    """
    if not text:
        return "", ""

    parts = [m.strip() for m in _COMPLETE_THINK.findall(text)]
    answer = _COMPLETE_THINK.sub("", text).strip()

    dangling = _OPEN_THINK.search(answer)
    if dangling:
        parts.append(dangling.group(1).strip())
        answer = answer[:dangling.start()].strip()

    thinking = "\n\n".join(p for p in parts if p)
    return thinking, answer
