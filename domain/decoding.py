"""Utilities for parsing SQL generation responses."""

import json
import re

from domain.entities import GenerationResult
from domain.errors import DecodeError

_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_fences(text: str) -> str:
    """Remove surrounding whitespace and one pair of markdown code fences.

    Handles both language-tagged (```` ```json ````) and bare fences. Text
    without fences is returned stripped, so the function is idempotent.
    """
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def decode_completion(raw_text: str) -> GenerationResult:
    """Parse the model completion into a :class:`GenerationResult`."""
    cleaned = strip_fences(raw_text)

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"Model response was not valid JSON ({e.msg})",
            raw_text=raw_text,
            reason="invalid_json",
        ) from e
    except RecursionError as e:
        raise DecodeError(
            "Model response was not valid JSON (nested too deeply)",
            raw_text=raw_text,
            reason="invalid_json",
        ) from e
    except ValueError as e:
        raise DecodeError(
            f"Model response was not valid JSON ({e})",
            raw_text=raw_text,
            reason="invalid_json",
        ) from e

    if not isinstance(payload, dict):
        raise DecodeError(
            f"Model response was JSON but not an object (got {type(payload).__name__})",
            raw_text=raw_text,
            reason="invalid_shape",
        )

    for key in ("sql", "explanation"):
        value = payload.get(key)
        if not isinstance(value, str):
            problem = "missing" if key not in payload else "not a string"
            raise DecodeError(
                f"Model response field '{key}' is {problem}",
                raw_text=raw_text,
                reason="invalid_shape",
            )

    return GenerationResult(sql=payload["sql"], explanation=payload["explanation"])
