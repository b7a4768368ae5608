from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import MissingConfigurationError


class Settings(BaseSettings):
    app_name: str = "Goal Coach AI Service"
    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-4o-mini"
    openai_timeout_seconds: float = 60.0
    cors_allow_origin: str = "*"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("openai_api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("openai_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def require_openai_api_key(self) -> str:
        if not self.openai_api_key:
            raise MissingConfigurationError("API key not configured")
        return self.openai_api_key


def get_settings() -> Settings:
    # Read per request so environment changes apply without a restart.
    return Settings()
