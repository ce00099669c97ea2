from typing import Iterable, List, Union

import config
from llm.schemas import ConversationTurn


def ensure_user_first(turns: Iterable[ConversationTurn]) -> List[ConversationTurn]:
    """
    Drop leading non-user turns; Sarvam rejects a conversation whose first
    non-system message is not from the user.
    """
    turns = list(turns)
    while turns and turns[0].role != "user":
        turns.pop(0)
    return turns


def prepare_history(
    previous: Iterable[Union[ConversationTurn, dict]],
    new_text: str,
    limit: int = config.MAX_HISTORY_TURNS,
) -> List[ConversationTurn]:
    """
    History to send with a new question: the last `limit` previous
    user/assistant turns, starting with a user turn, then the new question.
    """
    turns = [
        ConversationTurn.model_validate(t) for t in previous
    ]
    turns = [t for t in turns if t.role != "system"]
    recent = turns[-limit:] if limit > 0 else []

    recent = ensure_user_first(recent)
    recent.append(ConversationTurn(role="user", content=new_text))
    return recent
