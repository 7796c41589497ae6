"""
Render Pipeline
===============

Single entry point for producing the dashboard bitmap:
template composition -> rasterization -> BMP encoding.
"""

import time
from typing import Optional

from weather_panel.config.logging import get_logger
from weather_panel.config.settings import Settings, get_settings
from weather_panel.core.composition.compositor import TemplateCompositor
from weather_panel.core.rendering.bmp_encoder import BMPEncoder
from weather_panel.core.rendering.rasterizer import SVGRasterizer

logger = get_logger(__name__)


def render(settings: Optional[Settings] = None) -> bytes:
    """
    Render the weather dashboard as BMP bytes.

    Stateless and synchronous: every call reads the template and icons from
    disk and allocates its own tree, surface and buffer, so concurrent calls
    from different threads are safe.

    Args:
        settings: Settings to use, defaults to the global settings

    Returns:
        BMP file bytes

    Raises:
        RenderError: The first failure of any stage, unchanged
    """
    settings = settings or get_settings()
    start_time = time.perf_counter()

    document = TemplateCompositor(settings).compose()
    buffer = SVGRasterizer(settings).rasterize(document)
    bmp_bytes = BMPEncoder(settings).encode(buffer)

    logger.info(
        "Dashboard rendered",
        width=buffer.width,
        height=buffer.height,
        file_size=len(bmp_bytes),
        processing_time=round(time.perf_counter() - start_time, 4),
    )
    return bmp_bytes
