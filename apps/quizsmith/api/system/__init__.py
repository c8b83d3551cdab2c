from quizsmith.api.system.routes import router

__all__ = ["router"]
