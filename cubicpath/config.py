"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cubicpath_env: str = "development"
    cubicpath_log_level: str = "info"

    # Default optimizer tolerance when a request does not set one
    cubicpath_slope_tolerance: float = 0.0
    # Threads used to fan out per-path parsing; 1 parses sequentially
    cubicpath_workers: int = 1

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
