from __future__ import annotations
from typing import Tuple, Union

SYSTEM_PROMPT = (
    "You are a scheduling API. Return ONLY valid JSON. "
    "No markdown, no code fences, no extra text."
)

# Shape the normalizer in parser.py expects back.
USER_PROMPT_TEMPLATE = """Create a {duration}-hour timetable focused on: {focus}.
{constraints_line}
Use 1-hour blocks starting at 08:00.
Return a JSON object with shape: {{ "timetable": [ ... ] }}.
Each timetable item must be an object with:
- time: string like "08:00 - 09:00"
- activity: short title
- description: one sentence
- badge: one of "work", "study", "break", "meal", or null
Return exactly {duration} items unless constraints make it impossible."""


def _format_hours(duration: Union[int, float]) -> str:
    if isinstance(duration, float) and duration.is_integer():
        return str(int(duration))
    return str(duration)


def build_prompts(focus: str, duration: Union[int, float], constraints: str = "") -> Tuple[str, str]:
    """Return (system_prompt, user_prompt) for one timetable request."""
    if constraints:
        constraints_line = f"Constraints/preferences: {constraints}"
    else:
        constraints_line = "Constraints/preferences: none."
    user_prompt = USER_PROMPT_TEMPLATE.format(
        duration=_format_hours(duration),
        focus=focus,
        constraints_line=constraints_line,
    )
    return SYSTEM_PROMPT, user_prompt
