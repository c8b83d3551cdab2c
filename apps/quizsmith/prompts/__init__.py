"""Markdown prompt templates shipped with the package."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

_TEMPLATE_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=None)
def load_prompt(*parts: str) -> str:
    """Return the stripped text of a template, e.g. ``load_prompt("quiz", "generate.md")``.

    Raises ``FileNotFoundError`` when the template is not packaged.
    """

    path = _TEMPLATE_DIR.joinpath(*parts)
    if not path.is_file():  # pragma: no cover - packaging error
        raise FileNotFoundError(f"Prompt template missing: {path}")
    return path.read_text(encoding="utf-8").strip()


__all__ = ["load_prompt"]
