import unittest

from app.scheduling.intervals import (
    InvalidTimeError,
    add_minutes,
    contains,
    is_valid_time,
    minutes_to_time,
    overlaps,
    time_to_minutes,
)


class TestTimeParsing(unittest.TestCase):
    def test_time_to_minutes(self):
        self.assertEqual(time_to_minutes("00:00"), 0)
        self.assertEqual(time_to_minutes("09:30"), 570)
        self.assertEqual(time_to_minutes("23:59"), 1439)

    def test_malformed_times_are_rejected(self):
        for bad in ["25:00", "24:00", "12:60", "9:00", "09:0", "", "noon", "09:00:00", None]:
            with self.subTest(value=bad):
                self.assertFalse(is_valid_time(bad))
                with self.assertRaises(InvalidTimeError):
                    time_to_minutes(bad)

    def test_invalid_time_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            time_to_minutes("99:99")

    def test_minutes_to_time_zero_pads(self):
        self.assertEqual(minutes_to_time(0), "00:00")
        self.assertEqual(minutes_to_time(545), "09:05")

    def test_minutes_to_time_does_not_wrap_past_midnight(self):
        self.assertEqual(minutes_to_time(1440), "24:00")
        self.assertEqual(minutes_to_time(1530), "25:30")

    def test_add_minutes(self):
        self.assertEqual(add_minutes("09:00", 90), "10:30")
        self.assertEqual(add_minutes("23:30", 60), "24:30")


class TestIntervalRelations(unittest.TestCase):
    def test_contains_is_inclusive_of_both_edges(self):
        self.assertTrue(contains(540, 720, 540, 720))
        self.assertTrue(contains(540, 720, 600, 660))

    def test_contains_rejects_one_minute_overhang(self):
        self.assertFalse(contains(540, 720, 539, 600))
        self.assertFalse(contains(540, 720, 660, 721))

    def test_overlaps_is_half_open(self):
        self.assertTrue(overlaps(600, 660, 630, 690))
        self.assertFalse(overlaps(600, 660, 660, 720))
        self.assertFalse(overlaps(660, 720, 600, 660))
        self.assertTrue(overlaps(600, 720, 630, 640))
