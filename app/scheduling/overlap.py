"""
Overlap Detection

Staff-side conflicts for a candidate slot:
- existing live bookings of the staff member on that date
- active staff blocks (vacation, sick leave, ...) covering that date

Blocks may span several days; each day only sees the part of the block that
falls on it.
"""

from collections.abc import Iterable
from datetime import date
from typing import Protocol

from app.scheduling.intervals import MINUTES_PER_DAY, minutes_to_time, overlaps, time_to_minutes


class BlockLike(Protocol):
    start_date: date
    end_date: date
    start_time: str
    end_time: str


class BookingLike(Protocol):
    start_time: str
    end_time: str


def block_window_for_date(block: BlockLike, on_date: date) -> tuple[int, int] | None:
    """
    Minutes of `on_date` covered by the block, or None if the block does not touch that date.

    Single day: [start_time, end_time)
    First day of a multi-day block: [start_time, 24:00)
    Last day: [00:00, end_time)
    Days in between: the whole day
    """
    if on_date < block.start_date or on_date > block.end_date:
        return None

    starts_today = on_date == block.start_date
    ends_today = on_date == block.end_date
    window_start = time_to_minutes(block.start_time) if starts_today else 0
    window_end = time_to_minutes(block.end_time) if ends_today else MINUTES_PER_DAY
    return window_start, window_end


def find_conflicts(
    start_minutes: int,
    end_minutes: int,
    on_date: date,
    blocks: Iterable[BlockLike],
    bookings: Iterable[BookingLike],
) -> tuple[list[BookingLike], list[BlockLike]]:
    """Bookings and blocks that share at least one minute with [start_minutes, end_minutes)."""
    booking_conflicts = [
        b
        for b in bookings
        if overlaps(start_minutes, end_minutes, time_to_minutes(b.start_time), time_to_minutes(b.end_time))
    ]
    block_conflicts = []
    for block in blocks:
        window = block_window_for_date(block, on_date)
        if window is not None and overlaps(start_minutes, end_minutes, *window):
            block_conflicts.append(block)
    return booking_conflicts, block_conflicts


def has_conflict(
    start_minutes: int,
    end_minutes: int,
    on_date: date,
    blocks: Iterable[BlockLike],
    bookings: Iterable[BookingLike],
) -> bool:
    booking_conflicts, block_conflicts = find_conflicts(start_minutes, end_minutes, on_date, blocks, bookings)
    return bool(booking_conflicts or block_conflicts)


def day_grid(start_hour: int, end_hour: int, cadence: int) -> list[str]:
    """Start times from start_hour (inclusive) to end_hour (exclusive) every `cadence` minutes."""
    return [minutes_to_time(m) for m in range(start_hour * 60, end_hour * 60, cadence)]


def staff_slot_availability(
    slot_times: Iterable[str],
    duration_minutes: int,
    on_date: date,
    blocks: Iterable[BlockLike],
    bookings: Iterable[BookingLike],
) -> list[tuple[str, bool]]:
    """(time, available) for each slot; a slot is busy if [time, time + duration) hits any conflict."""
    blocks = list(blocks)
    bookings = list(bookings)
    out: list[tuple[str, bool]] = []
    for slot in slot_times:
        start = time_to_minutes(slot)
        busy = has_conflict(start, start + duration_minutes, on_date, blocks, bookings)
        out.append((slot, not busy))
    return out
