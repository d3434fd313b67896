"""Recover one JSON object from free-text model output.

Stages run strictest first: the whole text, then a fenced code block, then
the span between the first ``{`` and the last ``}``. Each stage is a pure
function returning the parsed object or ``None``.
"""

import json
import re
from collections.abc import Callable
from typing import Any

from cricket_stats.fetching.exceptions import ExtractionError

Stage = Callable[[str], dict[str, Any] | None]

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


def _load_object(candidate: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


def parse_direct(text: str) -> dict[str, Any] | None:
    return _load_object(text.strip())


def parse_fenced_block(text: str) -> dict[str, Any] | None:
    match = _FENCED_BLOCK.search(text)
    if match is None:
        return None
    return _load_object(match.group(1))


def parse_brace_span(text: str) -> dict[str, Any] | None:
    """Parse from the first ``{`` to the last ``}``, nesting unchecked."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return _load_object(text[start : end + 1])


STAGES: tuple[tuple[str, Stage], ...] = (
    ("direct", parse_direct),
    ("fenced", parse_fenced_block),
    ("brace_span", parse_brace_span),
)


def normalize(text: str, stages: tuple[tuple[str, Stage], ...] = STAGES) -> dict[str, Any]:
    """Return the first JSON object any stage recovers from ``text``.

    Raises:
        ExtractionError: when every stage fails.
    """
    last_stage = ""
    for name, stage in stages:
        last_stage = name
        parsed = stage(text)
        if parsed is not None:
            return parsed

    start = text.find("{")
    if start == -1 or text.rfind("}") < start:
        raise ExtractionError("No JSON found in response", stage=last_stage)
    raise ExtractionError("Failed to parse JSON from response", stage=last_stage)
