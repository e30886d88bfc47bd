from datetime import UTC, datetime

from sqlmodel import Field, SQLModel

from app.scheduling.schedule import ScheduleParseResult, parse_schedule


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class Service(SQLModel, table=True):
    __tablename__ = "services"
    id: int | None = Field(default=None, primary_key=True)
    name: str
    duration: int = 60  # minutes
    # JSON-encoded weekly schedule; empty means no bookable hours
    availability: str | None = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=_utc_naive_now)

    def parsed_availability(self) -> ScheduleParseResult:
        return parse_schedule(self.availability)
