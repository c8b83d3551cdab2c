from __future__ import annotations

from quizsmith.prompts import load_prompt
from quizsmith.schemas.quiz import QuizRequest

SYSTEM_PROMPT = load_prompt("quiz", "system.md")
QUIZ_PROMPT = load_prompt("quiz", "generate.md")

DEFAULT_LANGUAGE = "Indonesia"


def render_quiz_instruction(request: QuizRequest, *, language: str = DEFAULT_LANGUAGE) -> str:
    """Fill the quiz template with the requested count, topic and language."""
    return QUIZ_PROMPT.format(
        number_question=request.number_question,
        topic=request.topic,
        language=language,
    )


def build_quiz_prompt(
    request: QuizRequest, *, language: str = DEFAULT_LANGUAGE
) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": render_quiz_instruction(request, language=language)},
    ]


__all__ = ["build_quiz_prompt", "render_quiz_instruction"]
