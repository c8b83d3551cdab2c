"""Pydantic schemas shared across the app."""

from .quiz import QuizEnvelope, QuizItem, QuizRequest, validate_quiz_output

__all__ = ["QuizEnvelope", "QuizItem", "QuizRequest", "validate_quiz_output"]
