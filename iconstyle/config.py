"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    iconstyle_env: str = "development"
    iconstyle_log_level: str = "info"

    # Batch export worker threads (0 = executor default)
    iconstyle_max_workers: int = 0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
