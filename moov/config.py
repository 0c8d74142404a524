"""Client configuration via environment variables."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    base_url: str = "https://api.moov.io"
    public_key: str = ""
    secret_key: str = ""
    http_timeout_seconds: float = 20.0
    user_agent: str = "moov-client-python/0.1.0"
    log_level: str = "INFO"

    model_config = {"env_prefix": "MOOV_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Route the client's loggers to stderr at the configured level."""
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
