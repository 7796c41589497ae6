"""
FastAPI Application
===================

HTTP front end for the weather dashboard renderer.

Endpoints:
- GET /path/refresh_image: the dashboard as a BMP image
- GET /health: template and icon availability
- GET /: service information
"""

from contextlib import asynccontextmanager
import uuid
from typing import AsyncGenerator, Any

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
import structlog
import uvicorn

from weather_panel.config.settings import get_settings
from weather_panel.config.logging import get_logger
from weather_panel.api.routes.health import router as health_router
from weather_panel.api.routes.render import FAILURE_MESSAGE, router as render_router

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log the resource configuration on startup."""
    logger.info(
        "Starting weather panel",
        environment=settings.environment,
        template=str(settings.template_path),
        icon_slots=list(settings.icon_slots),
    )
    try:
        yield
    finally:
        logger.info("Shutting down weather panel")


# Create FastAPI app
settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    description="Render a weather dashboard as a BMP image for e-paper displays",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.include_router(render_router)
app.include_router(health_router)


@app.middleware("http")
async def add_request_id(request: Request, call_next) -> Response:  # type: ignore
    """Tag the request, its log events and its response with a request id."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    request.state.request_id = request_id

    with structlog.contextvars.bound_contextvars(request_id=request_id):
        response = await call_next(request)  # type: ignore

    response.headers[REQUEST_ID_HEADER] = request_id  # type: ignore
    return response  # type: ignore


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Log unexpected errors; the client only gets the generic failure text."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        exception=str(exc),
        request_id=getattr(request.state, "request_id", None),
        exc_info=True,
    )

    return PlainTextResponse(FAILURE_MESSAGE, status_code=500)


@app.get("/", tags=["General"])
async def root() -> dict[str, Any]:
    """Service name, version and endpoint listing."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "health_check": "/health",
        "endpoints": {
            "refresh_image": "GET /path/refresh_image",
        },
    }


def run_development_server() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    logger.info("Listening", host=settings.host, port=settings.port)
    uvicorn.run(
        "weather_panel.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


def create_app() -> FastAPI:
    """
    Application factory used by tests and ASGI servers.

    Returns:
        FastAPI application instance
    """
    return app


if __name__ == "__main__":
    run_development_server()
