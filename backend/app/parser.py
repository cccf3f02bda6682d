from __future__ import annotations
from typing import Any, List, Optional, Union

from .schema import TimetableItem


def _is_blank(entry: Any) -> bool:
    # empty dicts are kept (they become an all-default item)
    if entry is None or entry is False or entry == "":
        return True
    return isinstance(entry, (int, float)) and not isinstance(entry, bool) and entry == 0


def _to_item(entry: Any) -> TimetableItem:
    if not isinstance(entry, dict):
        return TimetableItem()
    return TimetableItem(
        time=entry.get("time"),
        activity=entry.get("activity"),
        description=entry.get("description"),
        badge=entry.get("badge"),
    )


def normalize_timetable(parsed: Any, duration: Union[int, float]) -> Optional[List[TimetableItem]]:
    """
    Accepts any of:
      - [{"time":..., "activity":..., "description":..., "badge":...}, ...]
      - {"timetable": [...]}
    Anything else gives None. Blank entries are dropped, the rest is cut to
    `duration` items (never padded) and every missing field gets its default.
    The badge is passed through as-is, even outside BADGES.
    """
    if isinstance(parsed, list):
        raw = parsed
    elif isinstance(parsed, dict):
        raw = parsed.get("timetable")
    else:
        return None
    if not isinstance(raw, list):
        return None

    kept = [entry for entry in raw if not _is_blank(entry)]
    return [_to_item(entry) for entry in kept[: int(duration)]]
