from __future__ import annotations

import logging
from dataclasses import dataclass

import openai
from pydantic import ValidationError

from quizsmith.core.exceptions import AuthError, InternalError, ProviderError
from quizsmith.schemas.quiz import QuizEnvelope, QuizItem, QuizRequest
from quizsmith.services.llm_service import LLMService
from quizsmith.services.quiz_prompt import DEFAULT_LANGUAGE, build_quiz_prompt

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Invalid or missing GROQ_API_KEY."
PROVIDER_FAILURE_MESSAGE = "The quiz provider did not return a usable quiz."
INTERNAL_FAILURE_MESSAGE = "Unexpected error occurred."


@dataclass
class QuizGenerator:
    """Generate a multiple-choice quiz for a topic with one structured call."""

    llm: LLMService
    language: str = DEFAULT_LANGUAGE

    def generate(self, request: QuizRequest) -> list[QuizItem]:
        if not self.llm.has_credential:
            raise AuthError(MISSING_KEY_MESSAGE)

        messages = build_quiz_prompt(request, language=self.language)
        try:
            envelope = self.llm.structured(messages=messages, schema=QuizEnvelope)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            logger.warning("Provider rejected credential: %s", exc)
            raise AuthError(MISSING_KEY_MESSAGE) from exc
        except openai.OpenAIError as exc:
            logger.exception("Quiz provider call failed (topic=%r)", request.topic)
            raise ProviderError(PROVIDER_FAILURE_MESSAGE) from exc
        except ValidationError as exc:
            logger.warning(
                "Quiz provider output failed schema validation (topic=%r): %s",
                request.topic,
                exc,
            )
            raise ProviderError(PROVIDER_FAILURE_MESSAGE) from exc
        except Exception as exc:
            logger.exception("Quiz generation failed unexpectedly (topic=%r)", request.topic)
            raise InternalError(INTERNAL_FAILURE_MESSAGE) from exc

        logger.info(
            "Generated %d/%d quiz questions for topic=%r",
            len(envelope.questions),
            request.number_question,
            request.topic,
        )
        return envelope.questions


__all__ = ["QuizGenerator"]
