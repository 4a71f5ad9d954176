"""Application configuration via environment variables.

Settings are read with pydantic-settings from ``REPUESTOS_*`` variables
(or a ``.env`` file in the working directory).

Environment Variables:
    REPUESTOS_DATA_DIR: Directory holding the JSON data files
    REPUESTOS_LOG_LEVEL: Logging level for the ``repuestos`` logger
    REPUESTOS_ORDER_NUMBER_PREFIX: Prefix of human-readable order numbers
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="REPUESTOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    log_level: str = "WARNING"
    order_number_prefix: str = "PED-"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Call ``get_settings.cache_clear()`` to reload settings.
    """
    return Settings()
