"""Tests for the configuration loading.
"""

import logging
import os
from unittest.mock import patch

from notecal.core.config import Settings, get_settings
from notecal.core.logging_config import LOGGING_CONFIG, build_logging_config

def test_settings_loading_directly():
    """Test that Settings can be initialized directly with values.

    Bypasses environment variables and .env files.
    """
    test_values = {
        "environment": "testing",
        "debug": True,
        "default_time_zone": "Europe/Berlin",
        "GOOGLE_OAUTH_TOKENS_PATH": "/tmp/tokens.json",
        "api_port": 9000,
    }
    # Explicitly disable .env file reading when passing direct values
    settings = Settings(**test_values, _env_file=None)

    assert isinstance(settings, Settings)
    assert settings.environment == "testing"
    assert settings.debug is True
    assert settings.default_time_zone == "Europe/Berlin"
    assert settings.GOOGLE_OAUTH_TOKENS_PATH == "/tmp/tokens.json"
    assert settings.api_port == 9000

def test_settings_defaults():
    """Test that Settings use default values when environment variables are not set."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert settings.debug is False
    assert settings.default_time_zone == "Etc/UTC"
    assert settings.cors_origins == ["https://app.tana.inc"]
    assert settings.GOOGLE_CALENDAR_API_SCOPES == ["https://www.googleapis.com/auth/calendar.events"]

def test_settings_read_environment():
    with patch.dict(os.environ, {"default_time_zone": "Asia/Tokyo", "environment": "production"}, clear=True):
        settings = get_settings()

    assert settings.default_time_zone == "Asia/Tokyo"
    assert settings.environment == "production"

def test_logging_config_levels():
    config = build_logging_config("info")

    assert config["loggers"][""]["level"] == logging.INFO
    assert config["handlers"]["console"]["level"] == logging.INFO
    assert build_logging_config("not-a-level")["loggers"][""]["level"] == logging.DEBUG
    assert LOGGING_CONFIG["loggers"]["uvicorn.access"]["level"] == logging.WARNING
