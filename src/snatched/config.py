from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SNATCHED_",
        case_sensitive=False,
    )

    # App
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    db_url: str = "sqlite+aiosqlite:///./snatched.db"

    # Analytics
    timezone: str = "UTC"  # IANA name used for calendar-day bucketing
    recent_records_limit: int = 10
    contribution_weeks: int = 30


def get_settings() -> Settings:
    return Settings()
