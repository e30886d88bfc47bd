import json
import unittest
from datetime import date

from app.scheduling.schedule import (
    DayAvailability,
    ScheduleStatus,
    TimeInterval,
    Weekday,
    WeeklySchedule,
    coerce_schedule,
    parse_schedule,
)
from tests.support import CLINIC_WEEK, FRIDAY, MONDAY, SATURDAY, SUNDAY, day, schedule_json


class TestWeekday(unittest.TestCase):
    def test_sunday_first_index(self):
        self.assertIs(Weekday.from_index(0), Weekday.SUNDAY)
        self.assertIs(Weekday.from_index(1), Weekday.MONDAY)
        self.assertIs(Weekday.from_index(6), Weekday.SATURDAY)

    def test_for_date(self):
        self.assertIs(Weekday.for_date(SUNDAY), Weekday.SUNDAY)
        self.assertIs(Weekday.for_date(MONDAY), Weekday.MONDAY)
        self.assertIs(Weekday.for_date(FRIDAY), Weekday.FRIDAY)
        self.assertIs(Weekday.for_date(SATURDAY), Weekday.SATURDAY)

    def test_for_date_across_a_full_week(self):
        expected = list(Weekday)  # declared sunday..saturday
        for offset, weekday in enumerate(expected):
            with self.subTest(offset=offset):
                self.assertIs(Weekday.for_date(date(2025, 8, 17 + offset)), weekday)


class TestParseSchedule(unittest.TestCase):
    def test_valid_schedule(self):
        result = parse_schedule(CLINIC_WEEK)
        self.assertTrue(result.ok)
        self.assertIs(result.status, ScheduleStatus.OK)
        monday = result.schedule.for_day(Weekday.MONDAY)
        self.assertTrue(monday.is_open)
        self.assertEqual(monday.time_slots[0], TimeInterval(start="09:00", end="13:00"))

    def test_missing_schedule(self):
        for raw in [None, "", "   "]:
            with self.subTest(raw=raw):
                result = parse_schedule(raw)
                self.assertFalse(result.ok)
                self.assertIs(result.status, ScheduleStatus.MISSING)
                self.assertIsNone(result.schedule)

    def test_malformed_schedule(self):
        for raw in ["not json", "[]", "null", '{"monday": {"enabled": true, "timeSlots": [{"start": "9am"}]}}']:
            with self.subTest(raw=raw):
                result = parse_schedule(raw)
                self.assertIs(result.status, ScheduleStatus.MALFORMED)
                self.assertIsNone(result.schedule)
                self.assertTrue(result.reason)

    def test_out_of_range_times_make_the_schedule_malformed(self):
        raw = schedule_json(monday=day(("09:00", "25:00")))
        self.assertIs(parse_schedule(raw).status, ScheduleStatus.MALFORMED)

    def test_inverted_window_is_accepted(self):
        raw = schedule_json(monday=day(("18:00", "09:00")))
        self.assertTrue(parse_schedule(raw).ok)

    def test_missing_days_are_none(self):
        schedule = parse_schedule(schedule_json(monday=day(("09:00", "12:00")))).schedule
        self.assertIsNone(schedule.for_day(Weekday.TUESDAY))

    def test_unknown_keys_are_ignored(self):
        raw = json.dumps({"monday": day(("09:00", "12:00")), "holidays": []})
        self.assertTrue(parse_schedule(raw).ok)

    def test_to_json_keeps_the_stored_shape(self):
        schedule = parse_schedule(schedule_json(monday=day(("09:00", "12:00")))).schedule
        self.assertEqual(
            json.loads(schedule.to_json()),
            {"monday": {"enabled": True, "timeSlots": [{"start": "09:00", "end": "12:00"}]}},
        )


class TestDayAvailability(unittest.TestCase):
    def test_disabled_or_empty_day_is_closed(self):
        self.assertFalse(DayAvailability(enabled=False, time_slots=[TimeInterval(start="09:00", end="10:00")]).is_open)
        self.assertFalse(DayAvailability(enabled=True, time_slots=[]).is_open)

    def test_coerce_schedule(self):
        parsed = parse_schedule(CLINIC_WEEK).schedule
        self.assertIs(coerce_schedule(parsed), parsed)
        self.assertIsInstance(coerce_schedule(CLINIC_WEEK), WeeklySchedule)
        self.assertIsNone(coerce_schedule("garbage"))
        self.assertIsNone(coerce_schedule(None))
