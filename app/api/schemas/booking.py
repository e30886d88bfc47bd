from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel

from app.scheduling.intervals import is_valid_time


def _check_time(v: str) -> str:
    if not is_valid_time(v):
        raise ValueError("start_time must be HH:MM (00:00-23:59)")
    return v


StartTime = Annotated[str, AfterValidator(_check_time)]


class BookingRequest(BaseModel):
    service_id: int
    staff_id: int
    date: date
    start_time: StartTime
    user_id: int | None = None
    notes: str | None = None


class RescheduleRequest(BaseModel):
    date: date
    start_time: StartTime
