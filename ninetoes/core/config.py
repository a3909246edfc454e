from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
import os


class Settings(BaseSettings):
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./ninetoes.db"
    )
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"
    DEFAULT_VARIANT: str = "classic"
    DEFAULT_DIFFICULTY: str = "medium"
    AI_SEED: Optional[int] = None
    STATS_KEY: str = "9toes-stats"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
