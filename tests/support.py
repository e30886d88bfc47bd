"""Shared fixtures for the test suite: schedules and an in-memory database."""

import json
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import app.models  # noqa: F401 - register tables

MONDAY = date(2025, 8, 18)
TUESDAY = date(2025, 8, 19)
FRIDAY = date(2025, 8, 15)
SATURDAY = date(2025, 8, 16)
SUNDAY = date(2025, 8, 17)


def day(*windows: tuple[str, str], enabled: bool = True) -> dict:
    return {"enabled": enabled, "timeSlots": [{"start": s, "end": e} for s, e in windows]}


def schedule_json(**days: dict) -> str:
    return json.dumps(days)


# Monday-Friday 09:00-13:00 and 14:00-18:00, weekends closed
CLINIC_WEEK = schedule_json(
    monday=day(("09:00", "13:00"), ("14:00", "18:00")),
    tuesday=day(("09:00", "13:00"), ("14:00", "18:00")),
    wednesday=day(("09:00", "13:00"), ("14:00", "18:00")),
    thursday=day(("09:00", "13:00"), ("14:00", "18:00")),
    friday=day(("09:00", "13:00"), ("14:00", "18:00")),
    saturday=day(enabled=False),
    sunday=day(enabled=False),
)


def make_engine():
    return create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


async def create_schema(engine) -> async_sessionmaker[AsyncSession]:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
