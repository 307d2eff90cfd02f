import logging
from typing import List

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # App info
    app_name: str = "PDF Chat Service"
    app_version: str = "0.1.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_allow_origins: List[str] = ["*"]

    # Claude API
    anthropic_api_key: str
    claude_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 4096

    # Upload limits
    max_upload_bytes: int = 10 * 1024 * 1024  # 10 MiB

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("anthropic_api_key")
    @classmethod
    def api_key_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("ANTHROPIC_API_KEY must not be blank")
        return v


def get_settings() -> Settings:
    """Load settings, exiting the process if the API credential is missing"""
    try:
        return Settings()
    except ValidationError as e:
        logger.critical(f"Error: ANTHROPIC_API_KEY is not defined in the environment or .env file ({e})")
        raise SystemExit(1) from e


settings = get_settings()
