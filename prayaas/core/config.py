from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_ENV: Literal["development", "production"] = "production"
    LOG_LEVEL: str = "INFO"
    ASSISTANT_NAME: str = "PRAYAAS"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]


settings = Settings()
