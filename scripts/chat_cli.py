import asyncio
import logging
import os
import sys
from typing import List

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import config
from advisor.history import prepare_history
from advisor.pipeline import get_chat_completion
from llm.sarvam_client import SarvamChatClient
from llm.schemas import ChatRequest, CompletionResult, ConversationTurn
from nlp.languages import LANGUAGES, language_name
from nlp.query_classifier import detect_category
from nlp.response_parser import split_thinking


def print_header(language: str):
    print("\n" + "=" * 60)
    print("🌾 FARMER SAHAYAK — Command Line Interface")
    print(f"Language: {language_name(language)} ({language})")
    print("Type your farming question.")
    print("Type 'exit' or 'quit' to stop.")
    print("=" * 60 + "\n")


def print_answer(result: CompletionResult, category: str) -> str:
    if not result.success:
        print("\n❌ ERROR:")
        print(result.error)
        print("\n" + "-" * 60 + "\n")
        return ""

    thinking, answer = split_thinking(result.data.content)

    print("\n🤖 ANSWER:")
    print(answer)

    if thinking:
        print("\n🧠 THINKING:")
        print(thinking)

    print("\n🧪 DIAGNOSTICS:")
    print(f"  category: {category}")
    print(f"  model: {result.data.model}")

    print("\n" + "-" * 60 + "\n")
    return answer


async def run(language: str):
    history: List[ConversationTurn] = []

    async with SarvamChatClient() as client:
        print_header(language)

        while True:
            try:
                query = input("👨‍🌾 Ask: ").strip()
            except (KeyboardInterrupt, EOFError):
                print("\n\n👋 Interrupted. Exiting cleanly.")
                break

            if not query:
                print("⚠️  Empty question. Try again.\n")
                continue

            if query.lower() in {"exit", "quit"}:
                print("\n👋 Exiting Farmer Sahayak. Goodbye.")
                break

            messages = prepare_history(history, query)
            request = ChatRequest(messages=messages, language=language)

            category = detect_category(query)
            result = await get_chat_completion(request, client=client, category=category)
            answer = print_answer(result, category.value)

            # a failed turn keeps the history as it was
            if result.success:
                history = messages + [ConversationTurn(role="assistant", content=answer)]


def main():
    logging.basicConfig(level=config.LOG_LEVEL)

    language = sys.argv[1] if len(sys.argv) > 1 else config.DEFAULT_LANGUAGE_CODE
    if language not in LANGUAGES:
        print(f"⚠️  Unknown language '{language}', answers will be in English.")

    asyncio.run(run(language))


if __name__ == "__main__":
    main()
