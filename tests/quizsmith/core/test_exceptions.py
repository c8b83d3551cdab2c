from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from quizsmith.core.exceptions import (
    AuthError,
    InternalError,
    ProviderError,
    register_exception_handlers,
)


def create_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def _boom() -> None:
        raise RuntimeError("kaboom")

    @app.get("/auth")
    def _auth() -> None:
        raise AuthError("Invalid or missing GROQ_API_KEY.")

    @app.get("/provider")
    def _provider() -> None:
        raise ProviderError("upstream said no", details={"attempts": 1})

    @app.get("/internal")
    def _internal() -> None:
        raise InternalError("bad wiring", code="wiring")

    @app.get("/http")
    def _http() -> None:
        raise HTTPException(status_code=404, detail="not found")

    @app.get("/needs-int")
    def _needs_int(x: int) -> dict[str, int]:
        return {"x": x}

    return app


def test_auth_error_maps_to_401():
    client = TestClient(create_app())
    resp = client.get("/auth")
    assert resp.status_code == 401
    data = resp.json()
    assert data["error"] == "API key error"
    assert data["message"] == "Invalid or missing GROQ_API_KEY."
    assert data["code"] == "auth_error"
    assert data["type"] == "AuthError"


def test_provider_error_maps_to_500_with_details():
    client = TestClient(create_app())
    resp = client.get("/provider")
    assert resp.status_code == 500
    data = resp.json()
    assert data["error"] == "Failed to generate quiz questions"
    assert data["message"] == "upstream said no"
    assert data["details"] == {"attempts": 1}


def test_internal_error_keeps_custom_code():
    client = TestClient(create_app())
    resp = client.get("/internal")
    assert resp.status_code == 500
    data = resp.json()
    assert data["code"] == "wiring"
    assert data["type"] == "InternalError"


def test_http_exception_is_normalized():
    client = TestClient(create_app())
    resp = client.get("/http")
    assert resp.status_code == 404
    data = resp.json()
    assert data["error"] == "not found"
    assert data["code"] == "http_exception"
    assert data["type"] == "HTTPException"


def test_validation_errors_are_400():
    client = TestClient(create_app())
    resp = client.get("/needs-int")
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Validation error"
    assert data["code"] == "validation_error"
    assert data["type"] == "RequestValidationError"
    assert isinstance(data["details"], list)


def test_unhandled_exceptions_are_normalized_and_do_not_leak_message():
    client = TestClient(create_app(), raise_server_exceptions=False)
    resp = client.get("/boom")
    assert resp.status_code == 500
    data = resp.json()
    assert data["error"] == "Internal server error"
    assert data["message"] == "Unexpected error occurred."
    assert data["code"] == "internal_error"
    assert data["type"] == "InternalServerError"
    assert "kaboom" not in resp.text
