import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Environment is loaded by Pydantic Settings (see quizsmith.core.settings).
from quizsmith import __version__
from quizsmith.api import register_routes
from quizsmith.core.exceptions import register_exception_handlers
from quizsmith.core.logging import log_requests, setup_logging
from quizsmith.core.settings import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    # Initialize logging early so all modules inherit the handlers/level
    setup_logging(settings.resolved_log_level)

    app = FastAPI(
        title="Quiz Generator API",
        description="Generate multiple-choice quizzes with a structured-output LLM",
        version=__version__,
    )
    register_exception_handlers(app)
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)

    logger.info("Quiz API initialized (model=%s)", settings.quiz_model)
    return app


app = create_app()
