import datetime as dt
from enum import Enum

from sqlmodel import Field, SQLModel


def _utc_naive_now() -> dt.datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return dt.datetime.now(dt.UTC).replace(tzinfo=None)


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# Statuses that still occupy the staff member's time
LIVE_STATUSES = (BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.COMPLETED)


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"
    id: int | None = Field(default=None, primary_key=True)
    service_id: int = Field(foreign_key="services.id", index=True)
    staff_id: int = Field(index=True)
    user_id: int | None = None
    date: dt.date = Field(index=True)
    start_time: str  # HH:MM
    end_time: str  # HH:MM, start_time + service duration
    status: BookingStatus = BookingStatus.PENDING
    notes: str | None = None
    created_at: dt.datetime = Field(default_factory=_utc_naive_now)
    updated_at: dt.datetime = Field(default_factory=_utc_naive_now)


class BookingCreate(SQLModel):
    service_id: int
    staff_id: int
    date: dt.date
    start_time: str
    user_id: int | None = None
    notes: str | None = None


class BookingReschedule(SQLModel):
    date: dt.date
    start_time: str


class BookingPublic(SQLModel):
    id: int
    service_id: int
    staff_id: int
    user_id: int | None = None
    date: dt.date
    start_time: str
    end_time: str
    status: BookingStatus
    notes: str | None = None
    created_at: dt.datetime
