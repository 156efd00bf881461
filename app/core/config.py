from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application configuration loaded from environment or .env."""

    app_name: str = Field(default="Translation API", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    debug: bool = Field(default=False, alias="APP_DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3001, alias="PORT")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS"
    )

    azure_translator_key: Optional[SecretStr] = Field(
        default=None, alias="AZURE_TRANSLATOR_KEY"
    )
    azure_region: str = Field(default="global", alias="AZURE_REGION")
    azure_endpoint: str = Field(
        default="https://api.cognitive.microsofttranslator.com", alias="AZURE_ENDPOINT"
    )
    translator_timeout_seconds: float = Field(
        default=10.0, gt=0, alias="TRANSLATOR_TIMEOUT_SECONDS"
    )
    languages_display_locale: str = Field(default="en", alias="LANGUAGES_DISPLAY_LOCALE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> AppSettings:
    """Return cached application settings."""
    return AppSettings()  # type: ignore[call-arg]
