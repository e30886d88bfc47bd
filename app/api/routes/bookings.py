import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas.booking import BookingRequest, RescheduleRequest
from app.core.db import get_session
from app.core.errors import BookingRejected, rejection_to_http
from app.models.booking import Booking, BookingCreate, BookingPublic, BookingReschedule
from app.services.booking_service import (
    cancel_booking,
    create_booking,
    get_booking,
    reschedule_booking,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/bookings", tags=["bookings"])


def _to_public(b: Booking) -> BookingPublic:
    return BookingPublic(
        id=int(b.id),
        service_id=b.service_id,
        staff_id=b.staff_id,
        user_id=b.user_id,
        date=b.date,
        start_time=b.start_time,
        end_time=b.end_time,
        status=b.status,
        notes=b.notes,
        created_at=b.created_at,
    )


@router.post("", response_model=BookingPublic, status_code=status.HTTP_201_CREATED)
async def book(
    body: BookingRequest,
    session: AsyncSession = Depends(get_session),
) -> BookingPublic:
    data = BookingCreate(**body.model_dump())
    try:
        booking = await create_booking(session, data)
    except BookingRejected as e:
        raise rejection_to_http(e) from e
    return _to_public(booking)


@router.get("/{booking_id}", response_model=BookingPublic)
async def read_booking(
    booking_id: int,
    session: AsyncSession = Depends(get_session),
) -> BookingPublic:
    booking = await get_booking(session, booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return _to_public(booking)


@router.patch("/{booking_id}", response_model=BookingPublic)
async def reschedule(
    booking_id: int,
    body: RescheduleRequest,
    session: AsyncSession = Depends(get_session),
) -> BookingPublic:
    data = BookingReschedule(date=body.date, start_time=body.start_time)
    try:
        booking = await reschedule_booking(session, booking_id, data)
    except BookingRejected as e:
        raise rejection_to_http(e) from e
    return _to_public(booking)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel(
    booking_id: int,
    session: AsyncSession = Depends(get_session),
) -> None:
    ok = await cancel_booking(session, booking_id)
    if not ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
