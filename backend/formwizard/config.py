from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    environment: str = "development"
    debug: bool = True
    allowed_origins: str = "http://localhost:3000"

    # Mock persistence endpoint
    api_latency_ms: int = 500  # artificial delay, 0 disables
    merge_strategy: Literal["nested", "shallow"] = "nested"

    # Client / background sync
    api_base_url: str = "http://localhost:8000"
    sync_interval_seconds: float = 5.0
    request_timeout_seconds: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
