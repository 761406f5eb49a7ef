"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "tool-rental"
    log_level: str = "INFO"

    # Dates
    date_format: str = "%m/%d/%y"  # Printed agreement dates
    two_digit_year_pivot: int = 69  # "YY" < pivot -> 20YY, otherwise 19YY

    # Holidays
    observe_weekend_holidays: bool = False  # Shift July 4th to Fri/Mon when it falls on a weekend

    # Catalog
    catalog_path: Optional[str] = None  # JSON tool list; seeded defaults when unset


settings = Settings()
