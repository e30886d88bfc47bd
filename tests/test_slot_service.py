"""
Tests for services/slot_service.py against an in-memory database.
"""

import unittest
from datetime import date

from app.models.booking import Booking, BookingStatus
from app.models.service import Service
from app.models.staff_block import BlockType, StaffBlock
from app.services.slot_service import (
    get_active_blocks_for_date,
    get_active_service,
    get_live_bookings_for_date,
    get_staff_slot_availability,
)
from tests.support import CLINIC_WEEK, MONDAY, TUESDAY, create_schema, make_engine

STAFF = 1
OTHER_STAFF = 2


class TestStaffSlotQueries(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.engine = make_engine()
        self.session_maker = await create_schema(self.engine)
        async with self.session_maker() as session:
            self.service = Service(name="Physiotherapy", duration=60, availability=CLINIC_WEEK)
            inactive = Service(name="Retired", duration=30, availability=CLINIC_WEEK, is_active=False)
            session.add_all([self.service, inactive])
            await session.flush()
            session.add_all(
                [
                    Booking(service_id=self.service.id, staff_id=STAFF, date=MONDAY, start_time="10:00", end_time="11:00"),
                    Booking(
                        service_id=self.service.id,
                        staff_id=STAFF,
                        date=MONDAY,
                        start_time="14:00",
                        end_time="15:00",
                        status=BookingStatus.CANCELLED,
                    ),
                    Booking(service_id=self.service.id, staff_id=OTHER_STAFF, date=MONDAY, start_time="15:00", end_time="16:00"),
                    StaffBlock(
                        staff_id=STAFF,
                        start_date=MONDAY,
                        end_date=TUESDAY,
                        start_time="16:00",
                        end_time="12:00",
                        type=BlockType.TRAINING,
                    ),
                    StaffBlock(
                        staff_id=STAFF,
                        start_date=MONDAY,
                        end_date=MONDAY,
                        start_time="08:00",
                        end_time="09:00",
                        type=BlockType.OTHER,
                        is_active=False,
                    ),
                ]
            )
            await session.commit()
            self.inactive_id = inactive.id

    async def asyncTearDown(self):
        await self.engine.dispose()

    async def test_get_active_service(self):
        async with self.session_maker() as session:
            self.assertIsNotNone(await get_active_service(session, self.service.id))
            self.assertIsNone(await get_active_service(session, self.inactive_id))
            self.assertIsNone(await get_active_service(session, 9999))

    async def test_only_live_bookings_of_the_staff_member(self):
        async with self.session_maker() as session:
            bookings = await get_live_bookings_for_date(session, STAFF, MONDAY)
        self.assertEqual([(b.start_time, b.end_time) for b in bookings], [("10:00", "11:00")])

    async def test_exclude_booking(self):
        async with self.session_maker() as session:
            live = await get_live_bookings_for_date(session, STAFF, MONDAY)
            remaining = await get_live_bookings_for_date(session, STAFF, MONDAY, exclude_booking_id=live[0].id)
        self.assertEqual(remaining, [])

    async def test_only_active_blocks_covering_the_date(self):
        async with self.session_maker() as session:
            monday = await get_active_blocks_for_date(session, STAFF, MONDAY)
            tuesday = await get_active_blocks_for_date(session, STAFF, TUESDAY)
            later = await get_active_blocks_for_date(session, STAFF, date(2025, 8, 20))
        self.assertEqual([b.type for b in monday], [BlockType.TRAINING])
        self.assertEqual(len(tuesday), 1)
        self.assertEqual(later, [])

    async def test_staff_slot_availability_monday(self):
        async with self.session_maker() as session:
            result = await get_staff_slot_availability(session, MONDAY, self.service, STAFF)
        self.assertEqual(result.service_duration, 60)
        self.assertEqual(result.staff_id, STAFF)
        self.assertEqual(len(result.slots), 48)
        free = result.availability_by_time()
        self.assertTrue(free["08:00"])  # inactive block ignored
        self.assertTrue(free["09:00"])
        self.assertFalse(free["09:30"])  # runs into the 10:00 booking
        self.assertFalse(free["10:30"])
        self.assertTrue(free["11:00"])
        self.assertTrue(free["14:00"])  # cancelled booking frees the slot
        self.assertTrue(free["15:00"])  # other staff member's booking
        self.assertFalse(free["15:30"])  # runs into the block starting 16:00
        self.assertFalse(free["23:30"])

    async def test_staff_slot_availability_last_day_of_block(self):
        async with self.session_maker() as session:
            free = (await get_staff_slot_availability(session, TUESDAY, self.service, STAFF)).availability_by_time()
        self.assertFalse(free["00:00"])
        self.assertFalse(free["11:30"])
        self.assertTrue(free["12:00"])

    async def test_staff_slot_availability_excluding_booking(self):
        async with self.session_maker() as session:
            booking_id = (await get_live_bookings_for_date(session, STAFF, MONDAY))[0].id
            free = (
                await get_staff_slot_availability(session, MONDAY, self.service, STAFF, exclude_booking_id=booking_id)
            ).availability_by_time()
        self.assertTrue(free["10:00"])
        self.assertTrue(free["09:30"])
