"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """attrguard settings loaded from ATTRGUARD_* environment variables."""

    # Logging
    LOG_LEVEL: str = "info"
    DEBUG: bool = False
    LOG_EVALUATIONS: bool = False

    # Reporting
    MAX_VALUE_REPR: int = 80

    model_config = {"env_prefix": "ATTRGUARD_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
