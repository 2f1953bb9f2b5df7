"""
Service settings, read from the environment and an optional .env file.

DATABASE_URL is the only required value; everything else has a default
suitable for local runs.
"""
from pathlib import Path
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    # postgresql+psycopg://... in deployment, sqlite:///... for local runs
    DATABASE_URL: str
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False  # log every SQL statement the engine emits

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS_ORIGINS as a list; '*' or a comma-separated set of origins"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

settings = Settings()
