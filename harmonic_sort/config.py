"""
Configuration management for harmonic-sort
"""

import math
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty disables the file handler

    # Sorting defaults
    bpm_bucket_size: float = 5.0
    ascending: bool = True

    @field_validator("bpm_bucket_size")
    @classmethod
    def _check_bucket_size(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"bpm_bucket_size must be positive, got {value}")
        return value

    class Config:
        env_prefix = "HARMONIC_SORT_"
        env_file = ".env"
        extra = "ignore"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
