from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # timeline
    minimum_days: int = Field(default=14, ge=1, alias="GANTTCORE_MINIMUM_DAYS")

    # reminders
    reminder_horizon_days: int = Field(default=7, ge=0, alias="GANTTCORE_REMINDER_HORIZON")
    reminder_limit: int = Field(default=5, ge=0, alias="GANTTCORE_REMINDER_LIMIT")

    # behavior
    log_level: str = Field(default="INFO", alias="GANTTCORE_LOG_LEVEL")


def get_settings() -> Settings:
    return Settings()
