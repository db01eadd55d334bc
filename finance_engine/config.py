"""
Configuration for the finance engine and its dashboard.

Values come from environment variables prefixed with ``FINANCE_``
(e.g. ``FINANCE_SEED_PATH``) or a local ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dashboard defaults. The engine itself takes everything as arguments."""

    model_config = SettingsConfigDict(
        env_prefix="FINANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed_path: Path = Field(
        default=Path("data/seed.json"),
        description="JSON snapshot read by JsonSnapshotProvider",
    )
    overview_months: int = Field(
        default=6,
        ge=1,
        le=24,
        description="Number of calendar months in the overview income/expense chart",
    )
    recent_limit: int = Field(
        default=4,
        ge=0,
        description="Transactions shown in the recent-transactions list",
    )
    page_size: int = Field(
        default=10,
        ge=1,
        description="Rows per page in the transactions table",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render log lines as JSON")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of {sorted(valid)}")
        return upper


@lru_cache
def get_settings() -> Settings:
    return Settings()
