from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from quizsmith.core.dependencies import get_quiz_generator
from quizsmith.core.responses import render_quiz
from quizsmith.schemas.quiz import QuizItem, QuizRequest
from quizsmith.services.quiz_generator import QuizGenerator

router = APIRouter(prefix="/ai", tags=["quiz"])


@router.post("/quiz", response_model=list[QuizItem])
def generate_quiz(
    payload: QuizRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
) -> JSONResponse:
    """Generate ``number_question`` multiple-choice questions about ``topic``."""
    return render_quiz(generator.generate(payload))
