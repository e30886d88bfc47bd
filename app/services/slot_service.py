from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.availability import SlotAvailability, StaffAvailability
from app.models.booking import LIVE_STATUSES, Booking
from app.models.service import Service
from app.models.staff_block import StaffBlock
from app.scheduling.overlap import day_grid, staff_slot_availability
from app.scheduling.slots import SLOT_CADENCE_MINUTES


async def get_active_service(session: AsyncSession, service_id: int) -> Service | None:
    result = await session.execute(
        select(Service).where(Service.id == service_id, Service.is_active.is_(True))
    )
    return result.scalar_one_or_none()


async def get_active_blocks_for_date(
    session: AsyncSession, staff_id: int, d: date
) -> list[StaffBlock]:
    """Active blocks of the staff member whose date range covers `d`."""
    result = await session.execute(
        select(StaffBlock).where(
            StaffBlock.staff_id == staff_id,
            StaffBlock.is_active.is_(True),
            StaffBlock.start_date <= d,
            StaffBlock.end_date >= d,
        )
    )
    return list(result.scalars().all())


async def get_live_bookings_for_date(
    session: AsyncSession,
    staff_id: int,
    d: date,
    exclude_booking_id: int | None = None,
) -> list[Booking]:
    q = select(Booking).where(
        Booking.staff_id == staff_id,
        Booking.date == d,
        Booking.status.in_(LIVE_STATUSES),
    )
    if exclude_booking_id is not None:
        q = q.where(Booking.id != exclude_booking_id)
    result = await session.execute(q.order_by(Booking.start_time))
    return list(result.scalars().all())


async def get_staff_slot_availability(
    session: AsyncSession,
    on_date: date,
    service: Service,
    staff_id: int,
    exclude_booking_id: int | None = None,
) -> StaffAvailability:
    """Staff-side availability for every start time of the business-hours grid.

    `exclude_booking_id` ignores one booking, so a booking being moved does not
    conflict with itself.
    """
    # One session cannot run statements concurrently, so the two reads are sequential.
    blocks = await get_active_blocks_for_date(session, staff_id, on_date)
    bookings = await get_live_bookings_for_date(session, staff_id, on_date, exclude_booking_id)

    grid = day_grid(settings.business_start_hour, settings.business_end_hour, SLOT_CADENCE_MINUTES)
    slots = [
        SlotAvailability(time=t, available=ok)
        for t, ok in staff_slot_availability(grid, service.duration, on_date, blocks, bookings)
    ]
    return StaffAvailability(
        date=on_date,
        service_id=service.id,
        staff_id=staff_id,
        service_duration=service.duration,
        slots=slots,
    )
