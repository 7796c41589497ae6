"""
Application Settings
===================

Service settings loaded with Pydantic Settings from WEATHER_PANEL_* environment
variables and an optional .env file: server address, template and icon
resources, placeholder values, rasterization and logging.
"""

from typing import Dict, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

from weather_panel import __version__


class Settings(BaseSettings):
    """Weather panel settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Weather Panel", description="Application name")
    app_version: str = Field(default=__version__, description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=3000, description="Server port")

    # Resource Configuration (relative paths resolve against the working directory)
    template_path: Path = Field(
        default=Path("assets/weather_template.svg"), description="Dashboard SVG template"
    )
    icon_slots: Dict[str, Path] = Field(
        default={"day1-icon": Path("assets/icons/snow-icon.svg")},
        description="Ordered mapping of slot element id to icon SVG path",
    )
    placeholders: Dict[str, str] = Field(
        default={"Den": "Pondelok", "Teplota": "15°C"},
        description="Placeholder field name to replacement text",
    )

    # Rendering Configuration
    default_icon_viewbox: str = Field(
        default="0 0 48 48", description="viewBox assumed for icons that declare none"
    )
    icon_preserve_aspect_ratio: Optional[str] = Field(
        default=None, description="preserveAspectRatio for spliced icons (omitted when unset)"
    )
    raster_dpi: float = Field(default=96.0, description="DPI used to resolve SVG units")
    unpremultiply_alpha: bool = Field(
        default=False, description="Un-premultiply alpha before BMP encoding"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Path = Field(default=Path("./logs"), description="Log file directory")
    log_max_bytes: int = Field(
        default=10 * 1024 * 1024, description="Log file size in bytes before rotation"
    )
    log_backup_count: int = Field(default=5, description="Rotated log files kept")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("raster_dpi")
    @classmethod
    def validate_raster_dpi(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Raster DPI must be positive")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="WEATHER_PANEL_",
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
