"""Request and provider-output schemas for quiz generation."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic_core import PydanticCustomError


def _reject_bool_and_str(value: Any) -> Any:
    # Whole-number floats such as 3.0 still pass; "3" and true do not.
    if isinstance(value, (bool, str)):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


Topic = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]
QuestionCount = Annotated[int, BeforeValidator(_reject_bool_and_str)]


class QuizRequest(BaseModel):
    """Incoming body for ``POST /ai/quiz``."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"topic": "sejarah", "number_question": 3},
        }
    )

    topic: Topic = Field(..., description="Subject the questions should cover")
    number_question: QuestionCount = Field(
        ...,
        ge=1,
        le=10,
        description="How many multiple-choice questions to generate",
    )


class QuizItem(BaseModel):
    """A single multiple-choice question.

    ``correct_answer`` is not checked against ``options``; the provider output is
    trusted once it matches the shape.
    """

    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: list[str] = Field(..., min_length=4, max_length=4)
    correct_answer: str = Field(..., alias="correctAnswer")


class QuizEnvelope(BaseModel):
    """Object-rooted wrapper requested from the provider."""

    questions: list[QuizItem]


def validate_quiz_output(data: Any) -> list[QuizItem]:
    """Parse provider output (JSON text, a dict envelope or a bare list) into quiz items."""
    if isinstance(data, (str, bytes, bytearray)):
        return QuizEnvelope.model_validate_json(data).questions
    if isinstance(data, list):
        data = {"questions": data}
    return QuizEnvelope.model_validate(data).questions


__all__ = ["QuizEnvelope", "QuizItem", "QuizRequest", "validate_quiz_output"]
