"""
Health Routes
=============

FastAPI routes for health check endpoints.
"""

import os
from pathlib import Path
from typing import Dict

from fastapi import APIRouter, Response

from weather_panel.config.logging import get_logger
from weather_panel.config.settings import Settings, get_settings
from weather_panel.models.schemas import HealthStatus

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


def is_readable(path: Path) -> bool:
    """Check that a resource file exists and can be opened for reading."""
    return path.is_file() and os.access(path, os.R_OK)


def check_resources(settings: Settings) -> Dict[str, object]:
    """
    Check the template and every configured icon.

    Args:
        settings: Settings naming the template and icon paths

    Returns:
        Dictionary with template status and icon status per slot id
    """
    return {
        "template": is_readable(Path(settings.template_path)),
        "icons": {
            slot_id: is_readable(Path(icon_path))
            for slot_id, icon_path in settings.icon_slots.items()
        },
    }


@router.get("/health", response_model=HealthStatus)
async def health_check(response: Response) -> HealthStatus:
    """Report whether the render resources are available."""
    settings = get_settings()
    resources = check_resources(settings)
    icons: Dict[str, bool] = resources["icons"]  # type: ignore[assignment]
    healthy = bool(resources["template"]) and all(icons.values())

    if not healthy:
        response.status_code = 503
        logger.warning("Health check failed", resources=resources)

    return HealthStatus(
        status="healthy" if healthy else "unhealthy",
        version=settings.app_version,
        template=bool(resources["template"]),
        icons=icons,
    )
