"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_fragments: bool = Field(default=False, description="Emit a debug event for every appended fragment")
    console_colors: bool = Field(default=True, description="Colorize console log output")

    # Logfire
    logfire_enabled: bool = Field(default=False, description="Forward structlog events to Logfire")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TANK_",
        extra="ignore",  # Ignore extra fields in .env file
    )


settings = Settings()
