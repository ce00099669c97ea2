"""Pytest configuration and fixtures."""

import json
from typing import Callable, List, Optional

import httpx
import pytest

from llm.sarvam_client import SarvamChatClient


class UpstreamRecorder:
    """
    Fake Sarvam endpoint.

    Records every request and answers with a fixed status + JSON body.
    """

    def __init__(self, status_code: int = 200, payload: Optional[dict] = None, text: Optional[str] = None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {
            "model": "sarvam-m",
            "choices": [{"message": {"role": "assistant", "content": "Apply neem oil every 7 days."}}],
        }
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def make_client() -> Callable[..., SarvamChatClient]:
    def _make(handler, api_key: Optional[str] = "test-key") -> SarvamChatClient:
        return SarvamChatClient(
            api_key=api_key,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture
def make_upstream() -> Callable[..., UpstreamRecorder]:
    return UpstreamRecorder
