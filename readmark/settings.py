from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="READMARK_", extra="ignore")

    vocabulary_path: Optional[str] = None
    log_level: str = "INFO"
    include_style: bool = True


settings = Settings()
