from datetime import date, datetime
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo

import config
from llm.schemas import ChatContext, ConversationTurn
from nlp.languages import language_name
from nlp.query_classifier import GenerationPolicy


PERSONA = (
    'You are "Farmer Sahayak" (Farmer\'s Helper), an expert Indian agricultural '
    "advisor with deep knowledge of:\n"
    "- Crop cultivation, pest management, and disease control\n"
    "- Weather patterns and seasonal farming practices\n"
    "- Soil health, irrigation, and fertilization techniques\n"
    "- Market trends and pricing for agricultural products\n"
    "- Government schemes and subsidies for farmers\n"
    "- Traditional and modern farming methods suitable for India"
)


class PromptBuilder:
    """
    Formatting-only component.

    Responsibilities:
    - Persona + language instruction
    - Date / weather / plant-health context block
    - Step-by-step directive when the policy asks for thinking

    NO classification.
    NO history trimming (caller keeps the last few turns).
    NO I/O.
    """

    def __init__(self, timezone: str = config.ADVISOR_TIMEZONE):
        self.timezone = timezone

    # ---------------- MAIN ----------------

    def build(
        self,
        history: Iterable[ConversationTurn],
        language: str,
        context: Optional[ChatContext],
        policy: GenerationPolicy,
        today: Optional[date] = None,
    ) -> List[ConversationTurn]:
        system = ConversationTurn(
            role="system",
            content=self.system_prompt(language, context, policy, today),
        )
        return [system, *history]

    # ---------------- PROMPT BUILDING ----------------

    def system_prompt(
        self,
        language: str,
        context: Optional[ChatContext],
        policy: GenerationPolicy,
        today: Optional[date] = None,
    ) -> str:
        prompt = (
            f"{PERSONA}\n\n"
            "Your role:\n"
            "1. Provide practical, actionable advice that farmers can implement immediately\n"
            "2. Recommend affordable, locally available solutions\n"
            "3. Consider regional climate, soil types, and water availability\n"
            "4. Prioritize sustainable and organic methods when possible\n"
            f"5. Always respond entirely in {language_name(language)} language\n"
            "6. Keep answers clear, concise, and easy to understand for farmers "
            "with varying education levels"
            f"{self._context_block(context, today)}"
        )

        if policy.needs_thinking:
            prompt += f"\n\n{config.THINKING_INSTRUCTION}"

        return prompt

    # ---------------- CONTEXT FORMAT ----------------

    def _context_block(self, context: Optional[ChatContext], today: Optional[date]) -> str:
        lines = [f"- Current Date & Day: {format_long_date(today or self._today())}"]

        if context and context.weather:
            lines.append(f"- Current Weather Information: {context.weather}")
        if context and context.plant_health:
            lines.append(f"- Plant Health Analysis: {context.plant_health}")

        return "\n\nIMPORTANT CONTEXT:\n" + "\n".join(lines)

    def _today(self) -> date:
        return datetime.now(ZoneInfo(self.timezone)).date()


def format_long_date(day: date) -> str:
    # Monday, 19 October 2026
    return f"{day:%A}, {day.day} {day:%B} {day.year}"


_builder = PromptBuilder()


def assemble(
    history: Iterable[ConversationTurn],
    language: str,
    context: Optional[ChatContext],
    policy: GenerationPolicy,
    today: Optional[date] = None,
) -> List[ConversationTurn]:
    return _builder.build(history, language, context, policy, today=today)
