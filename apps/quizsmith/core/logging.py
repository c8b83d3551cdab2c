import logging
import os
import sys
import time

from fastapi import Request

access_logger = logging.getLogger("quizsmith.access")

_LEVEL_NAMES = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _resolve_level(raw: str | int | None) -> int:
    if isinstance(raw, int):
        return raw
    if not raw:
        return logging.INFO
    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return _LEVEL_NAMES.get(name, logging.INFO)


def setup_logging(level: str | int | None = None) -> None:
    """Configure the root logger for the service.

    ``level`` wins when given; otherwise ``QUIZSMITH_LOG_LEVEL`` then ``LOG_LEVEL``
    are consulted, and unknown names fall back to INFO. A stdout handler is
    attached only if the root logger has none yet, so repeated calls just
    adjust the level.
    """
    if level is None:
        level = os.getenv("QUIZSMITH_LOG_LEVEL") or os.getenv("LOG_LEVEL")

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        root.addHandler(handler)
        logging.captureWarnings(True)
    root.setLevel(_resolve_level(level))


async def log_requests(request: Request, call_next):
    """HTTP middleware writing one access line per request: method, path, status, duration."""
    started = time.perf_counter()
    access_logger.info("--> %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "<-- %s %s 500 %.1fms", request.method, request.url.path, elapsed_ms
        )
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        "<-- %s %s %s %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
