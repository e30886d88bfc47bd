from datetime import UTC, date, datetime
from enum import Enum

from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class BlockType(str, Enum):
    VACATION = "VACATION"
    SICK_LEAVE = "SICK_LEAVE"
    TRAINING = "TRAINING"
    OTHER = "OTHER"


class StaffBlock(SQLModel, table=True):
    __tablename__ = "staff_blocks"
    id: int | None = Field(default=None, primary_key=True)
    staff_id: int = Field(index=True)
    start_date: date = Field(index=True)
    end_date: date = Field(index=True)
    start_time: str  # HH:MM on start_date
    end_time: str  # HH:MM on end_date
    type: BlockType = BlockType.OTHER
    reason: str | None = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=_utc_naive_now)
