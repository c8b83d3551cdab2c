from __future__ import annotations

import os
import socket
from typing import Any

import pytest

# Set before quizsmith is imported so Settings skips .env files and a local
# GROQ_API_KEY never reaches the unit tests.
os.environ.setdefault("APP_ENV", "test")


class NetworkBlockedError(RuntimeError):
    pass


def _refuse_socket(*_args: Any, **_kwargs: Any) -> Any:
    raise NetworkBlockedError(
        "Outbound network is off in unit tests; mark the test "
        "@pytest.mark.integration or @pytest.mark.network, or export ALLOW_NETWORK=1."
    )


@pytest.fixture(autouse=True)
def _no_outbound_network(monkeypatch: pytest.MonkeyPatch, request: pytest.FixtureRequest) -> None:
    """Fail fast if a test would reach the real provider."""

    if os.getenv("ALLOW_NETWORK") == "1":
        return
    if any(request.node.get_closest_marker(name) for name in ("integration", "network")):
        return

    monkeypatch.setattr(socket, "create_connection", _refuse_socket)
    monkeypatch.setattr(socket, "getaddrinfo", _refuse_socket)


@pytest.fixture(autouse=True)
def _fresh_dependencies():
    """Rebuild settings-derived services for every test."""
    from quizsmith.core.dependencies import clear_dependency_caches

    clear_dependency_caches()
    yield
    clear_dependency_caches()
