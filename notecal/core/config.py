"""Configuration module for NoteCal Bridge.

This module handles all application configuration using pydantic-settings.
Values come from environment variables or a local .env file.
"""

import logging
from typing import List
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

# Explicitly load .env file BEFORE BaseSettings reads environment variables
load_dotenv()

logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    """Application settings class.

    This class defines all configuration settings for the application.
    Settings are loaded from environment variables with appropriate defaults.
    """

    # Application settings
    app_name: str = "NoteCal Bridge"
    environment: str = "development"
    debug: bool = False
    log_level: str = Field(default="DEBUG", description="Root log level for the application loggers.")

    # --- Calendar Settings ---
    default_time_zone: str = Field(
        default="Etc/UTC",
        description="IANA time zone applied to updated dates when the request does not name one."
    )
    cors_origins: List[str] = Field(
        default=["https://app.tana.inc"],
        description="Origins allowed to call the API from the browser (development only)."
    )

    # --- Google OAuth Settings ---
    GOOGLE_OAUTH_TOKENS_PATH: str = Field(
        default="data/google_oauth_tokens.json",
        description="Path to the stored Google OAuth tokens (relative to project root)."
    )
    GOOGLE_CALENDAR_API_SCOPES: List[str] = Field(
        default=["https://www.googleapis.com/auth/calendar.events"],
        description="Scopes for Google Calendar API access."
    )

    # API Server Configuration (for uvicorn)
    api_host: str = Field(default="0.0.0.0", description="Host for the FastAPI server.")
    api_port: int = Field(default=8000, description="Port for the FastAPI server.")
    api_reload: bool = Field(default=False, description="Enable auto-reload for the FastAPI server (development).")
    api_log_level: str = Field(default="info", description="Log level for the FastAPI server.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra='ignore'
    )

def get_settings() -> Settings:
    """Get application settings.

    Not cached, so edits to the environment between requests are picked up.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
