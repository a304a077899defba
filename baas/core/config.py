# baas/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from baas import __version__


class Settings(BaseSettings):
    """Application settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. Service identity
    # =========================================================
    SERVICE_NAME: str = Field(
        default="Backend Automation Service",
        description="Name reported by the health endpoint and the OpenAPI title",
    )
    SERVICE_VERSION: str = Field(default=__version__)
    API_PREFIX: str = Field(default="/baas", description="Prefix of every route")

    APP_MODE: Literal["debug", "release"] = Field(
        default="debug",
        description="release hides the interactive docs and quiets the console log",
    )

    # =========================================================
    # 2. Server
    # =========================================================
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)

    # =========================================================
    # 3. Database
    # =========================================================
    DATABASE_URL: Optional[str] = Field(
        default=None,
        description="SQLAlchemy URL of the admin database (required at startup)",
    )
    SQL_ECHO: bool = Field(default=False)

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_database_url(cls, v: Optional[str]) -> Optional[str]:
        """Accept the libpq `postgres://` scheme that SQLAlchemy rejects."""
        if v is None:
            return None
        v = str(v).strip()
        if not v:
            return None
        if v.startswith("postgres://"):
            return "postgresql://" + v[len("postgres://"):]
        return v

    # =========================================================
    # 4. Logging
    # =========================================================
    LOG_DIR: str = Field(default=".logs", description="Directory of the rotating log file")

    @property
    def is_release(self) -> bool:
        return self.APP_MODE == "release"

    @property
    def log_dir_path(self) -> Path:
        return Path(self.LOG_DIR).resolve()


@lru_cache
def get_settings() -> Settings:
    """Process-wide Settings instance."""
    return Settings()
