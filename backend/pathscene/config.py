"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathscene_env: str = "development"
    pathscene_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Partition service
    partition_service_url: str = "http://localhost:8000"
    partition_endpoint: str = "/partition-svg-paths"

    # Scene output
    default_scale: float = 1.0
    bounds_seed_origin: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
