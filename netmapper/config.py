"""Configuration management for netmapper"""

from functools import lru_cache

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Editor defaults, overridable with NETMAPPER_* environment variables"""
    grid_size: int = 20
    snap_to_grid: bool = True

    # Bulk CSV import lays devices out on a grid starting here
    csv_grid_cols: int = Field(default=5, gt=0)
    csv_start_x: float = 4000
    csv_start_y: float = 4000

    log_level: str = "WARNING"

    model_config = ConfigDict(
        env_prefix="NETMAPPER_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()
