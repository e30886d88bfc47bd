from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./physio_booking.db"
    create_tables_on_startup: bool = False

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Staff availability grid (start times reported by the staff query)
    business_start_hour: int = 0
    business_end_hour: int = 24  # exclusive

    # How long the slot resolver waits for staff data before falling back to
    # service-only availability
    staff_query_timeout_seconds: float = 5.0

    # Env
    env: str = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_postgres(self) -> bool:
        return self.database_url.startswith(("postgresql://", "postgresql+asyncpg://"))


settings = Settings()
