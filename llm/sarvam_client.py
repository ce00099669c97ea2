import logging
import time
from typing import Iterable, List, Optional, Tuple, Union

import httpx

import config
from llm.errors import (
    AdvisoryError,
    ConfigurationError,
    InvalidConversationError,
    NetworkError,
    UpstreamEmptyResponseError,
    UpstreamHTTPError,
)
from llm.schemas import CompletionRequest, CompletionResult, ConversationTurn
from nlp.query_classifier import GenerationPolicy

logger = logging.getLogger(__name__)


TurnLike = Union[ConversationTurn, dict]


class SarvamChatClient:
    """
    Single-shot client for Sarvam chat completions.

    - ONE POST per dispatch, no retries, no backoff
    - Policy decides sampling + opt-in fields
    - Never raises out of dispatch(): failures come back as
      CompletionResult(success=False, error=...)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: str = config.SARVAM_CHAT_MODEL,
        endpoint: str = config.SARVAM_CHAT_URL,
        timeout_seconds: float = config.SARVAM_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self.model = model
        self.endpoint = endpoint

        timeout = httpx.Timeout(timeout_seconds, read=timeout_seconds)
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    # ============================================================
    # REQUEST
    # ============================================================

    def build_request_body(
        self,
        messages: Iterable[TurnLike],
        policy: GenerationPolicy,
    ) -> dict:
        request = CompletionRequest(
            model=self.model,
            messages=_as_turns(messages),
            temperature=policy.temperature,
            max_tokens=policy.max_tokens,
            top_p=policy.top_p,
            frequency_penalty=config.FREQUENCY_PENALTY,
            presence_penalty=config.PRESENCE_PENALTY,
        )

        # hybrid thinking mode
        if policy.needs_thinking:
            request.reasoning_effort = policy.reasoning_effort

        if policy.needs_wiki_grounding:
            request.wiki_grounding = True

        return request.to_payload()

    # ============================================================
    # DISPATCH
    # ============================================================

    async def dispatch(
        self,
        messages: Iterable[TurnLike],
        policy: GenerationPolicy,
    ) -> CompletionResult:
        """
        Send one completion request.

        Returns:
            CompletionResult(success=True, data={content, model})
            CompletionResult(success=False, error="...")
        """
        try:
            content, model = await self._complete(messages, policy)
            return CompletionResult.ok(content=content, model=model)

        except UpstreamHTTPError as e:
            logger.error(
                "❌ Sarvam HTTP failure | status=%s | detail=%s",
                e.status_code,
                e.body,
            )
            return CompletionResult.fail(str(e))

        except NetworkError as e:
            logger.error("❌ Sarvam unreachable: %s", e.cause or e)
            return CompletionResult.fail(str(e))

        except AdvisoryError as e:
            logger.error("❌ Sarvam chat error: %s", e)
            return CompletionResult.fail(str(e))

        except Exception as e:
            logger.exception("❌ Unexpected Sarvam chat failure")
            return CompletionResult.fail(str(e) or "Failed to get chat response")

    async def _complete(
        self,
        messages: Iterable[TurnLike],
        policy: GenerationPolicy,
    ) -> Tuple[str, str]:
        api_key = self._api_key or config.get_sarvam_api_key()
        if not api_key:
            raise ConfigurationError("Sarvam API key not configured")

        turns = _as_turns(messages)
        _check_user_first(turns)

        body = self.build_request_body(turns, policy)
        headers = {
            "Content-Type": "application/json",
            "api-subscription-key": api_key,
        }

        logger.info(
            "📨 Sarvam request | model=%s | turns=%d | temp=%s | max_tokens=%d | effort=%s | wiki=%s",
            body["model"],
            len(turns),
            body["temperature"],
            body["max_tokens"],
            body.get("reasoning_effort", "-"),
            body.get("wiki_grounding", False),
        )

        start = time.perf_counter()
        try:
            response = await self._client.post(self.endpoint, json=body, headers=headers)
        except httpx.TimeoutException as e:
            raise NetworkError("Sarvam API request timed out", cause=e) from e
        except httpx.TransportError as e:
            raise NetworkError(f"Sarvam API unreachable: {e}", cause=e) from e

        latency_ms = (time.perf_counter() - start) * 1000

        if not response.is_success:
            raise UpstreamHTTPError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamEmptyResponseError("Sarvam API returned a non-JSON body") from e

        content = _first_choice_content(data)
        if content is None:
            raise UpstreamEmptyResponseError()

        model = str(data.get("model") or self.model)

        logger.info("✅ Sarvam response | model=%s | %.0f ms", model, latency_ms)
        return content, model


# ============================================================
# HELPERS
# ============================================================

def _as_turns(messages: Iterable[TurnLike]) -> List[ConversationTurn]:
    return [ConversationTurn.model_validate(m) for m in messages]


def _check_user_first(turns: List[ConversationTurn]) -> None:
    for turn in turns:
        if turn.role == "system":
            continue
        if turn.role != "user":
            raise InvalidConversationError(
                "Conversation must start with a user message"
            )
        return

    raise InvalidConversationError("Conversation has no user message")


def _first_choice_content(data) -> Optional[str]:
    """Text of choices[0].message.content, or None when the shape is off."""
    if not isinstance(data, dict):
        return None

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None

    choice = choices[0]
    message = choice.get("message") if isinstance(choice, dict) else None
    content = message.get("content") if isinstance(message, dict) else None

    return content if isinstance(content, str) else None
