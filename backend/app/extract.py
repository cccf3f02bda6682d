from __future__ import annotations
import json
import re
from typing import Any, Callable, Optional, Tuple

# ```json ... ``` or bare ``` ... ```; first block wins
_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)

_MISSING = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _strict_loads(text: str) -> Any:
    """json.loads, minus NaN/Infinity. Returns _MISSING when text is not JSON."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return _MISSING


def _candidate(text: str) -> str:
    trimmed = text.strip()
    m = _FENCE_RE.search(trimmed)
    return (m.group(1) if m else trimmed).strip()


def _whole(candidate: str) -> Any:
    return _strict_loads(candidate)


def _between(open_ch: str, close_ch: str) -> Callable[[str], Any]:
    def attempt(candidate: str) -> Any:
        start = candidate.find(open_ch)
        end = candidate.rfind(close_ch)
        if start == -1 or end == -1 or end <= start:
            return _MISSING
        return _strict_loads(candidate[start:end + 1])
    attempt.__name__ = f"between_{open_ch}{close_ch}"
    return attempt


# Tried in order; the first that parses wins.
ATTEMPTS: Tuple[Callable[[str], Any], ...] = (
    _whole,
    _between("{", "}"),
    _between("[", "]"),
)


def extract_json(text: Any) -> Optional[Any]:
    """
    Recover a JSON value from a model reply.

    Handles replies wrapped in a ``` fence (optionally tagged json) and replies
    with prose around the payload. The outermost {...} pair is tried before the
    outermost [...] pair. Returns None when nothing parses, or when the input is
    empty or not a string.

    Note that a JSON ``null`` payload is indistinguishable from failure.
    """
    if not text or not isinstance(text, str):
        return None
    candidate = _candidate(text)
    for attempt in ATTEMPTS:
        value = attempt(candidate)
        if value is not _MISSING:
            return value
    return None
