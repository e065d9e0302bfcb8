from pydantic import BaseModel, Field
import os
from functools import lru_cache


class Settings(BaseModel):
    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level, e.g. DEBUG, INFO, WARNING",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        # Leerer Wert fällt auf den Default zurück
        log_level = os.getenv("LOG_LEVEL", "").strip().upper()
        if not log_level:
            return cls()
        return cls(log_level=log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
