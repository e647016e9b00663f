from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    secrets_file: Path = Path(".secrets")
    notion_version: str = "2022-06-28"
    request_timeout: float = 30.0
    log_level: str = "WARNING"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
