"""
Schedule containment

Decides whether one exact [start, end) booking interval lies inside a service's
weekly schedule. Any problem with the inputs is treated as "not available".
"""

import logging
from datetime import date

from app.scheduling.intervals import InvalidTimeError, time_to_minutes
from app.scheduling.schedule import WeeklySchedule, coerce_schedule

logger = logging.getLogger(__name__)


def is_available(
    schedule: WeeklySchedule | str | None,
    on_date: date,
    start_time: str,
    end_time: str,
) -> bool:
    """True iff [start_time, end_time) fits inside a single open window of that weekday."""
    parsed = coerce_schedule(schedule)
    if parsed is None:
        return False

    day = parsed.for_date(on_date)
    if day is None or not day.is_open:
        return False

    try:
        start = time_to_minutes(start_time)
        end = time_to_minutes(end_time)
    except InvalidTimeError as e:
        logger.warning("Rejecting availability check with malformed time: %s", e)
        return False

    return any(interval.contains(start, end) for interval in day.time_slots)
