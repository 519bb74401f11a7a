from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

MAX_IMAGE_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    ping_message: str = "ping"
    cors_origins: list[str] = ["*"]

    analysis_provider: Literal["mock", "gemini"] = "mock"
    max_image_bytes: int = MAX_IMAGE_BYTES
    verification_seed: int | None = None

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout_seconds: float = 60.0
    gemini_max_retries: int = 1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
