"""
Slot Generation

Turns a day's open windows into discrete start times. Start times advance at a
fixed 30-minute cadence whatever the service duration is; a start time is only
offered when the whole service fits before its window closes.
"""

from app.scheduling.intervals import minutes_to_time
from app.scheduling.schedule import DayAvailability, TimeInterval

SLOT_CADENCE_MINUTES = 30


def _slots_in_interval(interval: TimeInterval, duration_minutes: int, cadence: int) -> list[str]:
    start = interval.start_minutes
    end = interval.end_minutes
    slots: list[str] = []
    current = start
    while current + duration_minutes <= end:
        slots.append(minutes_to_time(current))
        current += cadence
    return slots


def generate_slots(
    day: DayAvailability | None,
    duration_minutes: int,
    cadence: int = SLOT_CADENCE_MINUTES,
) -> list[str]:
    """
    Offerable start times for one day.

    Args:
        day: the day's availability, None when the schedule has no entry for it
        duration_minutes: how long one booking of the service lasts

    Returns:
        list[str]: sorted, de-duplicated "HH:MM" start times; empty when the day
        is closed or nothing fits
    """
    if day is None or not day.is_open or duration_minutes <= 0:
        return []

    slots: set[str] = set()
    for interval in day.time_slots:
        slots.update(_slots_in_interval(interval, duration_minutes, cadence))

    # zero-padded HH:MM sorts chronologically
    return sorted(slots)
