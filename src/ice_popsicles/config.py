"""
Application settings.

Values come from environment variables prefixed ``ICE_POPSICLES_`` (or a
``.env`` file).  Defaults reproduce the fixed winter window and state list, so
an unconfigured run always produces the same chart.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ice_popsicles.reference.state_grid import ALL_STATES
from ice_popsicles.reference.window import (
    DEFAULT_DPI,
    DEFAULT_END_DATE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_START_DATE,
)


class Settings(BaseSettings):
    """Runtime configuration for fetch and build."""

    model_config = SettingsConfigDict(
        env_prefix="ICE_POPSICLES_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "ice-popsicles"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    dpi: int = Field(default=DEFAULT_DPI, gt=0)

    states: list[str] = Field(default_factory=lambda: list(ALL_STATES))
    start_date: date = DEFAULT_START_DATE
    end_date: date = DEFAULT_END_DATE

    site_batch_size: int = Field(default=100, gt=0)
    skip_failed_states: bool = False

    @field_validator("states")
    @classmethod
    def _upper_states(cls, v: list[str]) -> list[str]:
        return [s.strip().upper() for s in v if s.strip()]

    @model_validator(mode="after")
    def _check_window(self) -> Settings:
        if self.start_date > self.end_date:
            msg = f"start_date {self.start_date} is after end_date {self.end_date}"
            raise ValueError(msg)
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
