"""
Weekly schedule model

A service's recurring availability is stored as JSON on the Service row:

    {
        "monday": {"enabled": true, "timeSlots": [{"start": "09:00", "end": "13:00"}]},
        "tuesday": {"enabled": false, "timeSlots": []},
        ...
    }

Parsing happens once, when the service is loaded; the engine functions
only ever receive a validated WeeklySchedule.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.scheduling.intervals import contains, is_valid_time, time_to_minutes

logger = logging.getLogger(__name__)


class Weekday(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """Sunday-first, zero-based index: 0 = sunday ... 6 = saturday."""
        return _SUNDAY_FIRST[index]

    @classmethod
    def for_date(cls, d: date) -> "Weekday":
        # date.weekday() is Monday=0, shift to Sunday=0
        return cls.from_index((d.weekday() + 1) % 7)


_SUNDAY_FIRST: tuple[Weekday, ...] = (
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)


class TimeInterval(BaseModel):
    """One open window within a day. start < end is not enforced; inverted windows yield nothing."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def _check_time(cls, v: str) -> str:
        if not is_valid_time(v):
            raise ValueError(f"time must be HH:MM (00:00-23:59), got {v!r}")
        return v

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end)

    def contains(self, start_minutes: int, end_minutes: int) -> bool:
        return contains(self.start_minutes, self.end_minutes, start_minutes, end_minutes)


class DayAvailability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    time_slots: list[TimeInterval] = Field(default_factory=list, alias="timeSlots")

    @property
    def is_open(self) -> bool:
        return self.enabled and bool(self.time_slots)


class WeeklySchedule(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sunday: DayAvailability | None = None
    monday: DayAvailability | None = None
    tuesday: DayAvailability | None = None
    wednesday: DayAvailability | None = None
    thursday: DayAvailability | None = None
    friday: DayAvailability | None = None
    saturday: DayAvailability | None = None

    def for_day(self, day: Weekday) -> DayAvailability | None:
        return getattr(self, day.value)

    def for_date(self, d: date) -> DayAvailability | None:
        return self.for_day(Weekday.for_date(d))

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ScheduleStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ScheduleParseResult:
    status: ScheduleStatus
    schedule: WeeklySchedule | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ScheduleStatus.OK


def parse_schedule(raw: str | None) -> ScheduleParseResult:
    """Parse the JSON stored on Service.availability.

    Missing and malformed configurations are reported separately so callers can
    tell "closed" from "broken"; both mean no bookable hours.
    """
    if raw is None or not raw.strip():
        return ScheduleParseResult(ScheduleStatus.MISSING, reason="service has no availability configured")
    try:
        schedule = WeeklySchedule.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Malformed service availability: %s", e.errors(include_url=False))
        return ScheduleParseResult(ScheduleStatus.MALFORMED, reason=str(e))
    return ScheduleParseResult(ScheduleStatus.OK, schedule=schedule)


def coerce_schedule(schedule: WeeklySchedule | str | None) -> WeeklySchedule | None:
    """Accept either an already-parsed schedule or its serialized form."""
    if isinstance(schedule, WeeklySchedule):
        return schedule
    return parse_schedule(schedule).schedule
