"""
Booking rejection errors and their HTTP mapping.
Services raise BookingRejected; routes turn it into an HTTPException.
"""
from enum import Enum

from fastapi import HTTPException, status


class RejectionReason(str, Enum):
    SERVICE_NOT_FOUND = "service_not_found"
    SERVICE_NOT_BOOKABLE = "service_not_bookable"  # schedule missing or malformed
    OUTSIDE_SCHEDULE = "outside_schedule"
    STAFF_CONFLICT = "staff_conflict"
    BOOKING_NOT_FOUND = "booking_not_found"


class BookingRejected(Exception):
    def __init__(self, reason: RejectionReason, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail


REJECTION_STATUS: dict[RejectionReason, int] = {
    RejectionReason.SERVICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    RejectionReason.SERVICE_NOT_BOOKABLE: status.HTTP_400_BAD_REQUEST,
    RejectionReason.OUTSIDE_SCHEDULE: status.HTTP_400_BAD_REQUEST,
    RejectionReason.STAFF_CONFLICT: status.HTTP_409_CONFLICT,
    RejectionReason.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def rejection_to_http(exc: BookingRejected) -> HTTPException:
    status_code = REJECTION_STATUS.get(exc.reason, status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=exc.detail)
