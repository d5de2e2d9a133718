from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="VMX_")

    default_area_units: float = 15000
    default_tier: str = "standard"
    delta_medium_threshold: float = 0.015
    delta_high_threshold: float = 0.03
    delta_sort_mode: str = "impact"
    delta_drivers_only: bool = False
    benchmark_library_path: Optional[Path] = None
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
