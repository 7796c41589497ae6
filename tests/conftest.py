"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides testing settings, temporary SVG assets and sample documents.
"""

import os

# Must be set before the package configures logging on import
os.environ.setdefault("WEATHER_PANEL_ENVIRONMENT", "testing")

import pytest
from pathlib import Path
from typing import Dict, Generator

from pydantic_settings import SettingsConfigDict

import weather_panel.config.settings as settings_module
from weather_panel.config.settings import Settings

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"

SVG_NS = "http://www.w3.org/2000/svg"


# Test settings override
class TestSettings(Settings):
    """Test-specific settings pointing at the bundled assets."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"
    template_path: Path = ASSETS_DIR / "weather_template.svg"
    icon_slots: Dict[str, Path] = {"day1-icon": ASSETS_DIR / "icons" / "snow-icon.svg"}

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override application settings for testing."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    yield test_settings
    settings_module.settings = previous


@pytest.fixture
def sample_template() -> str:
    """Small dashboard template with two placeholders and one icon slot."""
    return (
        f'<svg xmlns="{SVG_NS}" width="120" height="80" viewBox="0 0 120 80">'
        '<rect x="0" y="0" width="120" height="80" fill="#ffffff"/>'
        '<text x="4" y="14" font-size="12">{{Den}}</text>'
        '<text x="60" y="50" font-size="16">{{Teplota}}</text>'
        '<rect id="day1-icon" x="10" y="20" width="30px" height="40px" stroke-width="2"/>'
        "</svg>"
    )


@pytest.fixture
def sample_icon() -> str:
    """Icon with a 48x48 viewBox."""
    return (
        f'<svg xmlns="{SVG_NS}" viewBox="0 0 48 48">'
        '<path d="M4 4h40v40H4z" fill="#000000"/>'
        '<circle cx="24" cy="24" r="8" fill="#ffffff"/>'
        "</svg>"
    )


@pytest.fixture
def asset_dir(tmp_path: Path, sample_template: str, sample_icon: str) -> Path:
    """Temporary directory holding the sample template and icon."""
    (tmp_path / "icons").mkdir()
    (tmp_path / "weather_template.svg").write_text(sample_template, encoding="utf-8")
    (tmp_path / "icons" / "snow-icon.svg").write_text(sample_icon, encoding="utf-8")
    return tmp_path


@pytest.fixture
def asset_settings(asset_dir: Path) -> Settings:
    """Settings reading the temporary template and icon."""
    return Settings(
        environment="testing",
        template_path=asset_dir / "weather_template.svg",
        icon_slots={"day1-icon": asset_dir / "icons" / "snow-icon.svg"},
        placeholders={"Den": "Pondelok", "Teplota": "15°C"},
    )
