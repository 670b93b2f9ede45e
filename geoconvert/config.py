"""Library configuration using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Conversion settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCONVERT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reduce tolerance in metres, applied when an encoded geography is invalid
    reduce_tolerance: float = Field(default=1.0, ge=0.0)

    # SRID given to geographies built from geometries without one (WGS 84)
    default_srid: int = 4326

    # Precision grid for decoded geometries, 0 keeps full floating precision
    precision_grid_size: float = Field(default=0.0, ge=0.0)

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts embedding the converter."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
