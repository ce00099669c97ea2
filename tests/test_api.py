"""
API Test

Evaluator intent:
- /chat mirrors the inbound contract {success, data?, error?}
- Upstream failure is a 200 with success=false (session survives)
"""

import httpx
import pytest
from fastapi.testclient import TestClient

import advisor.pipeline as pipeline_module
import api.app as app_module
from llm.sarvam_client import SarvamChatClient
from nlp.query_classifier import detect_category


@pytest.fixture
def api_client(monkeypatch):
    def _make(upstream):
        monkeypatch.setattr(
            app_module,
            "SarvamChatClient",
            lambda: SarvamChatClient(api_key="test-key", transport=httpx.MockTransport(upstream)),
        )
        return TestClient(app_module.app)
    return _make


def test_health(api_client, recorder):
    with api_client(recorder) as client:
        assert client.get("/").json() == {"status": "ok"}


def test_chat_success_splits_thinking(api_client, make_upstream):
    upstream = make_upstream(payload={
        "model": "sarvam-m",
        "choices": [{"message": {"content": "<think>Blast needs fungicide.</think>Spray tricyclazole."}}],
    })

    with api_client(upstream) as client:
        resp = client.post("/chat", json={
            "messages": [{"role": "user", "content": "rice leaves have brown spots"}],
            "language": "ta-IN",
            "context": {"plantHealth": "Detected: Rice blast (92.0% confidence)."},
        })

    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["data"]["model"] == "sarvam-m"
    assert body["answer"] == "Spray tricyclazole."
    assert body["thinking"] == "Blast needs fungicide."
    assert body["category"] == "disease"
    assert upstream.calls == 1


def test_chat_upstream_failure_is_not_5xx(api_client, make_upstream):
    upstream = make_upstream(status_code=500, text="internal error")

    with api_client(upstream) as client:
        resp = client.post("/chat", json={
            "messages": [{"role": "user", "content": "hello"}],
            "language": "en-IN",
        })

    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is False
    assert "500" in body["error"]
    assert body["data"] is None


@pytest.mark.parametrize("messages", [
    [],
    [{"role": "assistant", "content": "Namaste!"}],
])
def test_chat_without_user_turn_is_a_failed_turn(api_client, recorder, messages):
    with api_client(recorder) as client:
        resp = client.post("/chat", json={"messages": messages, "language": "en-IN"})

    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is False
    assert "user message" in body["error"]
    assert recorder.calls == 0


def test_chat_classifies_the_query_once(api_client, recorder, monkeypatch):
    seen = []

    def counting(text):
        seen.append(text)
        return detect_category(text)

    monkeypatch.setattr(app_module, "detect_category", counting)
    monkeypatch.setattr(pipeline_module, "detect_category", counting)

    with api_client(recorder) as client:
        resp = client.post("/chat", json={
            "messages": [{"role": "user", "content": "sell onion at mandi"}],
        })

    assert resp.json()["category"] == "market"
    assert seen == ["sell onion at mandi"]


def test_chat_rejects_bad_role(api_client, recorder):
    with api_client(recorder) as client:
        resp = client.post("/chat", json={
            "messages": [{"role": "farmer", "content": "hi"}],
            "language": "en-IN",
        })

    assert resp.status_code == 422


def test_classify(api_client, recorder):
    with api_client(recorder) as client:
        resp = client.post("/classify", json={"query": "what is today"})

    body = resp.json()
    assert body["category"] == "dateTime"
    assert body["policy"]["temperature"] == 0.2
    assert body["policy"]["max_tokens"] == 1700


def test_languages(api_client, recorder):
    with api_client(recorder) as client:
        codes = [lang["code"] for lang in client.get("/languages").json()]

    assert len(codes) == 11
    assert "od-IN" in codes
