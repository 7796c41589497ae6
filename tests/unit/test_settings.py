"""
Unit Tests for Settings
=======================

Unit tests for configuration defaults, validation and environment overrides.
"""

import pytest
import structlog
from pathlib import Path
from pydantic import ValidationError

from weather_panel.config.logging import build_processors, get_logging_config
from weather_panel.config.settings import Settings
from weather_panel import __version__


class TestSettings:
    """Test settings defaults and validators."""

    def test_defaults(self, monkeypatch):
        """Test the defaults reproduce the single-slot dashboard."""
        monkeypatch.delenv("WEATHER_PANEL_ENVIRONMENT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.host == "127.0.0.1"
        assert settings.port == 3000
        assert settings.template_path == Path("assets/weather_template.svg")
        assert list(settings.icon_slots) == ["day1-icon"]
        assert settings.placeholders == {"Den": "Pondelok", "Teplota": "15°C"}
        assert settings.default_icon_viewbox == "0 0 48 48"
        assert settings.icon_preserve_aspect_ratio is None
        assert settings.unpremultiply_alpha is False
        assert settings.app_version == __version__

    def test_environment_validation(self):
        """Test unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_validation(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_dpi_validation(self):
        """Test non-positive DPI is rejected."""
        with pytest.raises(ValidationError):
            Settings(raster_dpi=0)

    def test_env_overrides(self, monkeypatch):
        """Test environment variables with the WEATHER_PANEL_ prefix."""
        monkeypatch.setenv("WEATHER_PANEL_PORT", "8080")
        monkeypatch.setenv("WEATHER_PANEL_ICON_SLOTS", '{"day1-icon": "a.svg", "day2-icon": "b.svg"}')
        monkeypatch.setenv("WEATHER_PANEL_PLACEHOLDERS", '{"Den": "Piatok"}')

        settings = Settings()

        assert settings.port == 8080
        assert list(settings.icon_slots) == ["day1-icon", "day2-icon"]
        assert settings.icon_slots["day2-icon"] == Path("b.svg")
        assert settings.placeholders == {"Den": "Piatok"}


class TestLoggingConfig:
    """Test logging configuration per environment."""

    def test_testing_has_no_file_handlers(self):
        """Test that no log files are configured while testing."""
        config = get_logging_config(Settings(environment="testing"))

        assert list(config["handlers"]) == ["console"]
        assert config["loggers"][""]["handlers"] == ["console"]

    def test_production_uses_json(self, tmp_path):
        """Test production logs as JSON with rotating files."""
        config = get_logging_config(Settings(environment="production", log_dir=tmp_path))

        assert config["handlers"]["console"]["formatter"] == "json"
        assert config["handlers"]["file"]["filename"] == f"{tmp_path}/app.log"
        assert config["handlers"]["file"]["maxBytes"] == 10 * 1024 * 1024
        assert config["handlers"]["error_file"]["level"] == "ERROR"
        assert config["loggers"][""]["handlers"] == ["console", "file", "error_file"]

    def test_request_context_merged_into_events(self):
        """Test bound context variables reach every processor chain."""
        processors = build_processors(Settings(environment="development"))

        assert processors[0] is structlog.contextvars.merge_contextvars
