"""
Render Routes
=============

FastAPI route serving the dashboard bitmap.
"""

import asyncio

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from weather_panel.config.logging import get_logger
from weather_panel.core.errors import RenderError
from weather_panel.core.rendering.pipeline import render

logger = get_logger(__name__)

router = APIRouter(tags=["Rendering"])

BMP_MEDIA_TYPE = "image/bmp"
FAILURE_MESSAGE = "Failed to generate image"


@router.get("/path/refresh_image")
async def refresh_image(request: Request) -> Response:
    """
    Render the dashboard and return it as a BMP.

    Failures are logged with their kind and detail; the client only gets a
    generic 500.
    """
    request_id = getattr(request.state, "request_id", None)

    try:
        # Rendering is CPU bound and synchronous; keep it off the event loop
        image_data = await asyncio.to_thread(render)
    except RenderError as e:
        logger.error(
            "Error generating image",
            error_kind=e.kind,
            error=str(e),
            request_id=request_id,
        )
        return PlainTextResponse(FAILURE_MESSAGE, status_code=500)

    logger.info("Image served", file_size=len(image_data), request_id=request_id)
    return Response(content=image_data, media_type=BMP_MEDIA_TYPE)
