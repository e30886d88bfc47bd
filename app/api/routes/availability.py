import asyncio
import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_bookable_service
from app.api.schemas.availability import BookableSlotsResponse
from app.core.db import get_session
from app.models.availability import StaffAvailability
from app.models.booking import BookingStatus
from app.models.service import Service
from app.services.booking_service import get_booking
from app.services.reconciler import (
    HeldSlot,
    ServiceProfile,
    StaffQuery,
    resolve_bookable_slots,
)
from app.services.slot_service import get_staff_slot_availability

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/availability", tags=["availability"])


def make_staff_query(
    session: AsyncSession, service: Service, exclude_booking_id: int | None = None
) -> StaffQuery:
    """Staff query bound to the request session; rolls back if the query fails or is cancelled."""

    async def staff_query(on_date: date, service_id: int, staff_id: int) -> StaffAvailability:
        try:
            return await get_staff_slot_availability(
                session, on_date, service, staff_id, exclude_booking_id=exclude_booking_id
            )
        except (Exception, asyncio.CancelledError):
            # a timeout cancels the statement mid-flight
            await session.rollback()
            raise

    return staff_query


@router.get("/staff", response_model=StaffAvailability)
async def staff_availability(
    date_param: date = Query(..., alias="date"),
    staff_id: int = Query(...),
    exclude_booking_id: int | None = Query(None),
    service: Service = Depends(get_bookable_service),
    session: AsyncSession = Depends(get_session),
) -> StaffAvailability:
    """Staff-side slot grid for a day: start times free of live bookings and active staff blocks."""
    return await get_staff_slot_availability(
        session, date_param, service, staff_id, exclude_booking_id=exclude_booking_id
    )


@router.get("/slots", response_model=BookableSlotsResponse)
async def bookable_slots(
    date_param: date = Query(..., alias="date"),
    staff_id: int = Query(...),
    booking_id: int | None = Query(None, description="Booking being modified, if any"),
    service: Service = Depends(get_bookable_service),
    session: AsyncSession = Depends(get_session),
) -> BookableSlotsResponse:
    """Slots the booking and modification screens should offer for (service, staff, date)."""
    held: HeldSlot | None = None
    if booking_id is not None:
        booking = await get_booking(session, booking_id)
        if not booking or booking.status == BookingStatus.CANCELLED:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Booking not found or cancelled",
            )
        if booking.staff_id != staff_id or booking.service_id != service.id:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Booking belongs to a different service or staff member",
            )
        held = HeldSlot(date=booking.date, start_time=booking.start_time)

    staff_query = make_staff_query(session, service, exclude_booking_id=booking_id)
    slots = await resolve_bookable_slots(
        ServiceProfile.from_service(service), staff_id, date_param, staff_query, held=held
    )
    return BookableSlotsResponse(
        date=date_param,
        service_id=service.id,
        staff_id=staff_id,
        service_duration=service.duration,
        booking_id=booking_id,
        slots=slots,
    )
