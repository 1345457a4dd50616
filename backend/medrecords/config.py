from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Hosted store
    supabase_url: str = Field(default="", description="Base URL of the hosted store")
    supabase_key: str = Field(default="", description="API key sent with every store request")
    request_timeout: float = Field(default=30.0, gt=0)

    # Self-hosted store; takes precedence over the hosted one when set
    database_url: Optional[str] = None

    # OCR
    ocr_language: str = "eng"
    tesseract_cmd: Optional[str] = None

    log_level: str = "INFO"

    @property
    def uses_sql_store(self) -> bool:
        return bool(self.database_url)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
