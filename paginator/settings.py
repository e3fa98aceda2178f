import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, env_prefix="PAGINATOR_")

    # Paginator defaults
    DEFAULT_SCROLLING_STYLE: str = "Sliding"
    DEFAULT_ITEM_COUNT_PER_PAGE: int = 10
    DEFAULT_PAGE_RANGE: int = 10

    # Logging settings
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False
    ENVIRONMENT: str = "development"

    @field_validator("DEFAULT_ITEM_COUNT_PER_PAGE", "DEFAULT_PAGE_RANGE")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Page sizes and ranges must be at least one."""
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only standard logging level names are accepted."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{v}'")
        return level


app_settings = Settings()
