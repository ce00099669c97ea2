from advisor.history import ensure_user_first, prepare_history
from llm.schemas import ConversationTurn


def _turns(*roles):
    return [ConversationTurn(role=r, content=f"{r} {i}") for i, r in enumerate(roles)]


def test_keeps_last_five_and_appends_question():
    previous = _turns("user", "assistant", "user", "assistant", "user", "assistant", "user", "assistant")

    history = prepare_history(previous, "what about potash?")

    # last five = assistant, user, assistant, user, assistant -> leading assistant dropped
    assert [t.role for t in history] == ["user", "assistant", "user", "assistant", "user"]
    assert history[0].content == "user 4"
    assert history[-1] == ConversationTurn(role="user", content="what about potash?")


def test_first_turn_is_always_user():
    history = prepare_history(_turns("assistant", "assistant", "user", "assistant"), "ok")
    assert history[0].role == "user"
    assert history[0].content == "user 2"


def test_system_turns_are_dropped():
    previous = [{"role": "system", "content": "old prompt"}, {"role": "user", "content": "hi"}]
    history = prepare_history(previous, "next")
    assert [t.role for t in history] == ["user", "user"]


def test_empty_history():
    assert prepare_history([], "hello") == [ConversationTurn(role="user", content="hello")]


def test_ensure_user_first_keeps_valid_history():
    turns = _turns("user", "assistant")
    assert ensure_user_first(turns) == turns
    assert ensure_user_first(_turns("assistant")) == []
