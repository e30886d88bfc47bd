from datetime import date

from pydantic import BaseModel

from app.models.availability import SlotAvailability


class BookableSlotsResponse(BaseModel):
    date: date
    service_id: int
    staff_id: int
    service_duration: int
    booking_id: int | None = None  # set when resolving slots for a booking being modified
    slots: list[SlotAvailability]
