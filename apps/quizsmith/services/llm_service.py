from __future__ import annotations

import copy
import logging
from typing import Any, Optional, Type, TypeVar

from openai import OpenAI
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _deref(obj: object, defs: dict[str, object]) -> object:
    """Inline local ``#/$defs/Name`` references."""
    if isinstance(obj, dict):
        if "$ref" in obj:
            ref = obj["$ref"]
            if isinstance(ref, str) and ref.startswith("#/$defs/"):
                name = ref.split("/")[-1]
                target = defs.get(name, {})
                # Deep copy via recursion
                return _deref(target, defs)
        out: dict[str, object] = {}
        for k, v in obj.items():
            out[k] = _deref(v, defs)
        return out
    if isinstance(obj, list):
        return [_deref(x, defs) for x in obj]
    return obj


def _strictify(obj: object) -> None:
    """Close every object schema and mark all of its properties required."""
    if isinstance(obj, dict):
        if obj.get("type") == "object":
            # Disallow unknown keys
            obj["additionalProperties"] = False
            props = obj.get("properties")
            if isinstance(props, dict):
                # Strict mode expects 'required' listing all keys in properties
                obj["required"] = list(props.keys())
                for v in props.values():
                    _strictify(v)
        for key in ("items", "allOf", "anyOf", "oneOf"):
            if key in obj:
                val = obj[key]
                if isinstance(val, list):
                    for it in val:
                        _strictify(it)
                elif isinstance(val, dict):
                    _strictify(val)


def strict_json_schema(schema: Type[BaseModel]) -> dict[str, Any]:
    """Render a pydantic model as a self-contained strict JSON schema.

    Structured outputs reject ``$ref`` and require an object root with
    ``additionalProperties: false``.
    """
    json_schema: dict[str, Any] = copy.deepcopy(schema.model_json_schema())

    defs: dict[str, object] = {}
    for key in ("$defs", "definitions"):
        if isinstance(json_schema.get(key), dict):
            defs = json_schema[key]
            break
    if defs:
        json_schema = _deref(json_schema, defs)  # type: ignore[assignment]
        # Drop defs after inlining
        json_schema.pop("$defs", None)
        json_schema.pop("definitions", None)

    if json_schema.get("type") != "object":
        raise ValueError(f"Structured output schema must be an object: {schema.__name__}")

    _strictify(json_schema)
    return json_schema


class LLMService:
    """
    Thin client for an OpenAI-compatible chat completions endpoint (Groq by default).
    - Explicit configuration; nothing is read from the environment at call time.
    - Structured outputs validated against a pydantic schema.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
        openai_client: Optional[OpenAI] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.temperature = temperature
        self._openai_client: Optional[OpenAI] = openai_client

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    # ---------- internal helpers ----------

    @property
    def openai_client(self) -> OpenAI:
        if self._openai_client is None:
            kwargs: dict[str, object] = {"api_key": self.api_key, "max_retries": 0}
            if self.base_url:
                kwargs["base_url"] = self.base_url
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._openai_client = OpenAI(**kwargs)
        return self._openai_client

    # ---------- Structured outputs ----------

    def structured(
        self,
        messages: list[dict[str, str]],
        schema: Type[T],
        *,
        model: Optional[str] = None,
    ) -> T:
        """
        Enforce a Pydantic schema using JSON-schema structured outputs.
        Raises ``pydantic.ValidationError`` when the reply does not match.
        """
        model_name = model or self.model
        kwargs: dict[str, Any] = {}
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature

        logger.debug("Structured request model=%s schema=%s", model_name, schema.__name__)
        resp = self.openai_client.chat.completions.create(
            model=model_name,
            messages=messages,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": schema.__name__,
                    "schema": strict_json_schema(schema),
                    "strict": True,
                },
            },
            **kwargs,
        )
        raw = resp.choices[0].message.content
        return schema.model_validate_json(raw or "{}")


__all__ = ["LLMService", "strict_json_schema"]
