from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    ALLOWED_ORIGINS: str = "http://localhost:31368"
    LOG_LEVEL: str = "INFO"

    # Tagesgrenzen (lokale Mitternacht) für Stundenzettel
    TIMEZONE: str = "Europe/Berlin"

    # Soll-Arbeitszeit pro Tag, wenn kein Mitarbeiter-Wert mitgeschickt wird
    DEFAULT_DAILY_TARGET_MINUTES: int = 480

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()


@lru_cache
def get_settings() -> Settings:
    return settings
