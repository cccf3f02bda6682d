from __future__ import annotations
from typing import Any, List, Union
from pydantic import BaseModel, Field, field_validator

BADGES = ("work", "study", "break", "meal")

Number = Union[int, float]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class TimetableRequest(BaseModel):
    focus: str = Field(..., examples=["deep work"])
    duration: Number = Field(..., description="hours, 1..24 inclusive", examples=[3])
    constraints: str = ""

    @property
    def slots(self) -> int:
        """Upper bound on the number of items kept from the reply."""
        return int(self.duration)


class TimetableItem(BaseModel):
    time: str = Field(default="", examples=["08:00 - 09:00"])
    activity: str = Field(default="", examples=["Plan"])
    description: str = Field(default="", examples=["Set goals."])
    # one of BADGES in a well-behaved reply; passed through unchecked
    badge: Any = Field(default=None, examples=list(BADGES))

    @field_validator("time", "activity", "description", mode="before")
    @classmethod
    def _text_or_empty(cls, value):
        return _as_text(value)


class TimetableResponse(BaseModel):
    timetable: List[TimetableItem]


class ErrorResponse(BaseModel):
    error: str
