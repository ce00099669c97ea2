import logging
from typing import Optional

from advisor.prompt_builder import assemble
from llm.sarvam_client import SarvamChatClient
from llm.schemas import ChatRequest, CompletionResult
from nlp.patterns import IntentCategory
from nlp.query_classifier import POLICIES, detect_category, latest_user_query

logger = logging.getLogger(__name__)


async def get_chat_completion(
    request: ChatRequest,
    client: Optional[SarvamChatClient] = None,
    category: Optional[IntentCategory] = None,
) -> CompletionResult:
    """
    One conversational turn: classify -> assemble -> dispatch.

    Only the latest user message drives classification. Callers that have
    already classified it pass `category`. Without a client, one is opened
    for this turn and closed afterwards. Never raises; upstream failures
    come back as CompletionResult(success=False).
    """
    if client is None:
        async with SarvamChatClient() as owned:
            return await get_chat_completion(request, client=owned, category=category)

    if category is None:
        category = detect_category(latest_user_query(request.messages))

    logger.debug("🧭 Query classified as %s", category.value)
    policy = POLICIES[category]

    messages = assemble(
        history=request.messages,
        language=request.language,
        context=request.context,
        policy=policy,
    )

    result = await client.dispatch(messages, policy)

    if not result.success:
        logger.warning("⚠️ Chat turn failed: %s", result.error)

    return result
