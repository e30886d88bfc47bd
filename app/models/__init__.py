from app.models.service import Service
from app.models.staff_block import BlockType, StaffBlock
from app.models.availability import SlotAvailability, StaffAvailability
from app.models.booking import (
    LIVE_STATUSES,
    Booking,
    BookingCreate,
    BookingPublic,
    BookingReschedule,
    BookingStatus,
)

__all__ = [
    "Service",
    "SlotAvailability",
    "StaffAvailability",
    "BlockType",
    "StaffBlock",
    "LIVE_STATUSES",
    "Booking",
    "BookingCreate",
    "BookingPublic",
    "BookingReschedule",
    "BookingStatus",
]
