"""Central dependency providers.

These helpers keep the provider client process-scoped and reusable, avoiding
per-request connection creation and enabling test-time cache clearing/overrides.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from quizsmith.core.settings import get_settings

if TYPE_CHECKING:
    from quizsmith.services.llm_service import LLMService
    from quizsmith.services.quiz_generator import QuizGenerator


@lru_cache(maxsize=1)
def get_llm_service() -> LLMService:
    from quizsmith.services.llm_service import LLMService

    cfg = get_settings()
    return LLMService(
        api_key=cfg.groq_api_key.get_secret_value() if cfg.groq_api_key else None,
        model=cfg.quiz_model,
        base_url=cfg.groq_base_url,
        timeout=cfg.quiz_provider_timeout,
        temperature=cfg.quiz_temperature,
    )


@lru_cache(maxsize=1)
def get_quiz_generator() -> QuizGenerator:
    from quizsmith.services.quiz_generator import QuizGenerator

    return QuizGenerator(llm=get_llm_service(), language=get_settings().quiz_language)


def clear_dependency_caches() -> None:
    """Drop cached settings and services so the next request rebuilds them."""
    get_settings.cache_clear()
    get_llm_service.cache_clear()
    get_quiz_generator.cache_clear()


__all__ = ["clear_dependency_caches", "get_llm_service", "get_quiz_generator"]
