import datetime as dt

from sqlmodel import SQLModel


class SlotAvailability(SQLModel):
    time: str  # HH:MM start time
    available: bool


class StaffAvailability(SQLModel):
    """Staff-side view of a day: which start times are free of bookings and blocks."""

    date: dt.date
    service_id: int
    staff_id: int
    service_duration: int
    slots: list[SlotAvailability]

    def availability_by_time(self) -> dict[str, bool]:
        return {s.time: s.available for s in self.slots}
