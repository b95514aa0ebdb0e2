"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from geosections.engine.config import MAX_SEGMENTS_PER_SECTION


class Settings(BaseSettings):
    geosections_env: str = "development"
    geosections_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Request defaults for /api/sectionalize
    default_tracked_dimension_count: int = 2
    default_max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
