"""
Data models for timetable events.

Event, Location and Lecturer decode the raw JSON records delivered by the
upstream schedule API. They are frozen once validated.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.config import LOCAL_TIMEZONE

LOCAL_TZ = ZoneInfo(LOCAL_TIMEZONE)


def bool_from_str(value: Any) -> bool:
    """Upstream flags: only the string "0" means false."""
    return value != "0"


def to_utc(value: datetime) -> datetime:
    """Interpret a naive upstream timestamp as local time and convert to UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=LOCAL_TZ)
    return value.astimezone(timezone.utc)


class Location(BaseModel):
    """Room or building where an event takes place."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str | None = None
    street: str | None = None
    nr: str | None = None
    desc: str | None = None

    def contains_information(self) -> bool:
        # A house number alone is not enough to locate anything
        return self.name is not None or self.street is not None or self.desc is not None


class Lecturer(BaseModel):
    """Person running an event."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    mail: str | None = None

    def contains_information(self) -> bool:
        return self.name is not None or self.mail is not None


class Event(BaseModel):
    """One scheduled occurrence from the timetable."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    start: datetime
    end: datetime
    location: Location = Field(default_factory=Location)
    lecturer: Lecturer = Field(default_factory=Lecturer)
    information: str | None = None
    is_holiday: bool = Field(default=True, alias="isHoliday")
    is_exercise: bool = Field(default=True, alias="isExercise")
    is_all_day: bool = Field(default=False, alias="allDay")
    is_lecture: bool = Field(default=True, alias="isLecture")

    @field_validator("start", "end", mode="after")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        try:
            return to_utc(value)
        except OverflowError as e:
            # Near datetime.min/max the UTC equivalent is not representable
            raise ValueError(f"timestamp out of range: {value.isoformat()}") from e

    @field_validator("location", "lecturer", mode="before")
    @classmethod
    def _empty_when_null(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("is_holiday", "is_exercise", "is_lecture", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return bool_from_str(value)


@dataclass(frozen=True)
class EventCategories:
    """Distinct course names offered in one track."""

    track_label: str
    course_names: frozenset[str]


def render_location(location: Location) -> str:
    """Multi-line text form: name, street and number, description."""
    name = f"{location.name}\n" if location.name is not None else ""
    address = ""
    if location.street is not None:
        address = f"{location.street} {location.nr or ''}\n"
    return f"{name}{address}{location.desc or ''}".strip()


def render_lecturer(lecturer: Lecturer) -> str:
    """Organizer text in the form CN=<name>:MAILTO:<mail>."""
    if lecturer.name is not None and lecturer.mail is not None:
        return f"CN={lecturer.name}:MAILTO:{lecturer.mail}"
    if lecturer.name is not None:
        return f"CN={lecturer.name}"
    if lecturer.mail is not None:
        return f":MAILTO:{lecturer.mail}"
    return ""
