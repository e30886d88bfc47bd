"""
Bookable slot resolution

Combines the service's weekly schedule with staff-side availability:

1. Service phase: generate candidate start times from the schedule. An empty
   result means the service is closed that day and staff data is not queried.
2. Staff phase: ask the staff query which start times are free of bookings and
   staff blocks.
3. Combine: a slot is available only if its full [start, start + duration)
   interval is inside the schedule AND the staff query reports it free.

Failure policy:
- broken or missing schedule -> no slots (fail closed)
- staff query error or timeout -> every service slot available (fail open).
  The booking-commit check still rejects real conflicts.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date

from app.core.config import settings
from app.models.availability import SlotAvailability, StaffAvailability
from app.models.service import Service
from app.scheduling.availability import is_available
from app.scheduling.intervals import add_minutes
from app.scheduling.schedule import ScheduleParseResult, Weekday
from app.scheduling.slots import generate_slots

logger = logging.getLogger(__name__)

# (date, service_id, staff_id) -> staff-side availability for that day
StaffQuery = Callable[[date, int, int], Awaitable[StaffAvailability]]


@dataclass(frozen=True)
class ServiceProfile:
    """A service with its schedule parsed once, when it is loaded."""

    id: int
    duration: int
    schedule: ScheduleParseResult

    @classmethod
    def from_service(cls, service: Service) -> "ServiceProfile":
        return cls(id=service.id, duration=service.duration, schedule=service.parsed_availability())


@dataclass(frozen=True)
class HeldSlot:
    """Date and start time currently held by a booking that is being modified."""

    date: date
    start_time: str


def service_slots(service: ServiceProfile, on_date: date) -> list[str]:
    """Candidate start times from the service schedule alone."""
    if not service.schedule.ok:
        logger.warning(
            "Service %s has no usable availability (%s): %s",
            service.id,
            service.schedule.status.value,
            service.schedule.reason,
        )
        return []
    day = service.schedule.schedule.for_day(Weekday.for_date(on_date))
    return generate_slots(day, service.duration)


async def resolve_bookable_slots(
    service: ServiceProfile,
    staff_id: int,
    on_date: date,
    staff_query: StaffQuery,
    held: HeldSlot | None = None,
    timeout: float | None = None,
) -> list[SlotAvailability]:
    """
    Final bookable slots for (service, staff member, date).

    Args:
        service: the service being booked
        staff_id: staff member who would perform it
        on_date: requested date
        staff_query: staff-side availability source
        held: slot of the booking being modified; stays selectable on its
            original date even if the staff query reports it busy
        timeout: seconds to wait for staff_query, defaults to settings

    Returns:
        list[SlotAvailability]: sorted by time; empty when the service is closed
    """
    candidates = service_slots(service, on_date)
    if not candidates:
        return []

    if timeout is None:
        timeout = settings.staff_query_timeout_seconds

    try:
        staff = await asyncio.wait_for(staff_query(on_date, service.id, staff_id), timeout)
    except Exception as e:
        logger.warning(
            "Staff availability query failed for service=%s staff=%s date=%s (%s: %s); "
            "falling back to service-only availability",
            service.id,
            staff_id,
            on_date.isoformat(),
            type(e).__name__,
            e,
        )
        return [SlotAvailability(time=s, available=True) for s in candidates]

    staff_free = staff.availability_by_time()
    schedule = service.schedule.schedule
    out: list[SlotAvailability] = []
    for slot in candidates:
        end = add_minutes(slot, service.duration)
        in_schedule = is_available(schedule, on_date, slot, end)
        # Slots missing from the staff response count as busy
        staff_ok = staff_free.get(slot, False)
        is_held = held is not None and held.date == on_date and held.start_time == slot
        out.append(SlotAvailability(time=slot, available=(in_schedule and staff_ok) or is_held))
    return out
