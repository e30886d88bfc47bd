import logging
from datetime import UTC, date, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BookingRejected, RejectionReason
from app.models.booking import Booking, BookingCreate, BookingReschedule, BookingStatus
from app.models.service import Service
from app.scheduling.availability import is_available
from app.scheduling.intervals import add_minutes, time_to_minutes
from app.scheduling.overlap import find_conflicts
from app.services.slot_service import (
    get_active_blocks_for_date,
    get_active_service,
    get_live_bookings_for_date,
)

logger = logging.getLogger(__name__)


def _utc_naive_now() -> datetime:
    """Naive UTC for comparison with TIMESTAMP WITHOUT TIME ZONE."""
    return datetime.now(UTC).replace(tzinfo=None)


async def _load_service(session: AsyncSession, service_id: int) -> Service:
    service = await get_active_service(session, service_id)
    if not service:
        raise BookingRejected(RejectionReason.SERVICE_NOT_FOUND, "Service not found or not active")
    return service


async def check_booking_slot(
    session: AsyncSession,
    service: Service,
    staff_id: int,
    d: date,
    start_time: str,
    exclude_booking_id: int | None = None,
) -> str:
    """Authoritative check run when a booking is committed. Returns the booking end time.

    Raises BookingRejected when the schedule is unusable, the interval is not inside
    a single open window, or the staff member has an overlapping booking or block.
    """
    parsed = service.parsed_availability()
    if not parsed.ok:
        raise BookingRejected(
            RejectionReason.SERVICE_NOT_BOOKABLE,
            "The selected service has no configured hours and cannot be booked",
        )

    end_time = add_minutes(start_time, service.duration)
    if not is_available(parsed.schedule, d, start_time, end_time):
        raise BookingRejected(
            RejectionReason.OUTSIDE_SCHEDULE,
            "The selected time is not available for this service",
        )

    blocks = await get_active_blocks_for_date(session, staff_id, d)
    bookings = await get_live_bookings_for_date(session, staff_id, d, exclude_booking_id)
    start = time_to_minutes(start_time)
    booking_conflicts, block_conflicts = find_conflicts(
        start, start + service.duration, d, blocks, bookings
    )
    if booking_conflicts or block_conflicts:
        logger.info(
            "Slot %s %s rejected for staff %s: %d booking(s), %d block(s) overlap",
            d.isoformat(),
            start_time,
            staff_id,
            len(booking_conflicts),
            len(block_conflicts),
        )
        raise BookingRejected(
            RejectionReason.STAFF_CONFLICT,
            "The staff member is not available at the selected time",
        )
    return end_time


async def create_booking(session: AsyncSession, data: BookingCreate) -> Booking:
    service = await _load_service(session, data.service_id)
    end_time = await check_booking_slot(session, service, data.staff_id, data.date, data.start_time)
    booking = Booking(
        service_id=service.id,
        staff_id=data.staff_id,
        user_id=data.user_id,
        date=data.date,
        start_time=data.start_time,
        end_time=end_time,
        notes=data.notes,
    )
    session.add(booking)
    await session.flush()
    await session.refresh(booking)
    logger.info(
        "Booking %s created: service=%s staff=%s %s %s-%s",
        booking.id,
        service.id,
        booking.staff_id,
        booking.date.isoformat(),
        booking.start_time,
        booking.end_time,
    )
    return booking


async def get_booking(session: AsyncSession, booking_id: int) -> Booking | None:
    result = await session.execute(select(Booking).where(Booking.id == booking_id))
    return result.scalar_one_or_none()


async def reschedule_booking(
    session: AsyncSession, booking_id: int, data: BookingReschedule
) -> Booking:
    """Move a live booking; the booking itself is ignored when looking for conflicts."""
    booking = await get_booking(session, booking_id)
    if not booking or booking.status == BookingStatus.CANCELLED:
        raise BookingRejected(RejectionReason.BOOKING_NOT_FOUND, "Booking not found or cancelled")
    service = await _load_service(session, booking.service_id)
    end_time = await check_booking_slot(
        session, service, booking.staff_id, data.date, data.start_time, exclude_booking_id=booking.id
    )
    booking.date = data.date
    booking.start_time = data.start_time
    booking.end_time = end_time
    booking.updated_at = _utc_naive_now()
    session.add(booking)
    await session.flush()
    await session.refresh(booking)
    logger.info("Booking %s moved to %s %s", booking.id, booking.date.isoformat(), booking.start_time)
    return booking


async def cancel_booking(session: AsyncSession, booking_id: int) -> bool:
    booking = await get_booking(session, booking_id)
    if not booking:
        return False
    if booking.status != BookingStatus.CANCELLED:
        booking.status = BookingStatus.CANCELLED
        booking.updated_at = _utc_naive_now()
        session.add(booking)
        await session.flush()
        logger.info("Booking %s cancelled", booking.id)
    return True
