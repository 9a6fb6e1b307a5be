# ticket_portal/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Ticket Portal"
    APP_DESC: str = "Submit and browse support tickets"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Ticket backend consumed by the portal
    TICKETS_API_URL: str = Field(default="http://localhost:8080/api/tickets")
    TICKETS_API_TIMEOUT: float | None = None  # no client-side timeout

    # Reference backend only
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    CORS_ORIGINS: str = "http://localhost:4200,http://localhost:8080"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
