"""API router registration helpers.

To avoid import-time side effects (e.g., initializing provider clients) during test
collection or when importing submodules, routers are imported lazily inside
`register_routes` rather than at module import time.
"""

from fastapi import FastAPI


def register_routes(app: FastAPI) -> None:
    """Attach all API routers (lazy imports)."""
    from quizsmith.api.quiz import router as quiz_router
    from quizsmith.api.system import router as system_router

    routers = [
        system_router,
        quiz_router,
    ]
    for router in routers:
        app.include_router(router)
