from __future__ import annotations
import json
import math
from typing import Any, Mapping, Optional, Union

from .errors import ValidationError
from .schema import TimetableRequest

MIN_DURATION = 1
MAX_DURATION = 24


def decode_body(raw: Union[bytes, str, None]) -> Any:
    """
    Turn a raw request body into a payload.
    Empty bodies give None; bodies that are not JSON come back as the raw string.
    """
    if raw is None:
        return None
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    text = text.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def _as_payload(body: Any) -> Mapping[str, Any]:
    if isinstance(body, str):
        # a JSON document that itself decodes to a string, e.g. '"{\"focus\": ...}"'
        try:
            body = json.loads(body)
        except ValueError:
            body = None
    return body if isinstance(body, Mapping) else {}


def _to_number(value: Any) -> float:
    """
    Numeric value of a JSON value, loose like a browser's Number():
    null/false/""/[] are 0, true is 1, a one-element list is its element,
    anything else non-numeric is NaN.
    """
    if value is None or value is False:
        return 0.0
    if value is True:
        return 1.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    if isinstance(value, list):
        if not value:
            return 0.0
        if len(value) == 1:
            item = value[0]
            # a list is read through its text form, where true is not a number
            if isinstance(item, (bool, dict)):
                return math.nan
            return _to_number(item)
    return math.nan


def _coerce_duration(value: Any) -> Optional[Union[int, float]]:
    number = _to_number(value)
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def validate_request(body: Any) -> TimetableRequest:
    """Check focus/duration/constraints and return a TimetableRequest."""
    payload = _as_payload(body)

    focus = payload.get("focus")
    focus = focus.strip() if isinstance(focus, str) else ""
    if not focus:
        raise ValidationError("Missing focus.")

    duration = _coerce_duration(payload.get("duration"))
    if duration is None or not (MIN_DURATION <= duration <= MAX_DURATION):
        raise ValidationError(
            f"Invalid duration. Must be a number between {MIN_DURATION} and {MAX_DURATION}."
        )

    constraints = payload.get("constraints")
    constraints = constraints.strip() if isinstance(constraints, str) else ""

    return TimetableRequest(focus=focus, duration=duration, constraints=constraints)
