"""
Logging Configuration
=====================

structlog on top of the standard library logging tree.

Console output is rendered for humans in development and testing and as JSON
in production. Outside testing, everything is also written to rotating
``app.log`` and ``error.log`` files under ``settings.log_dir``. Values bound
with ``structlog.contextvars`` (the request id, for example) are merged into
every event logged while handling a request.
"""

import logging
import logging.config
import sys
from typing import Dict, Any, List, TYPE_CHECKING
import structlog
from structlog.types import Processor

from .settings import get_settings

if TYPE_CHECKING:
    from .settings import Settings


def build_processors(settings: "Settings") -> List[Processor]:
    """Return the structlog processor chain for the environment."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.environment == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        colors = settings.environment == "development"
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    return processors


def setup_logging() -> None:
    """Setup application logging configuration."""
    settings = get_settings()

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(get_logging_config(settings))


def _rotating_file_handler(settings: "Settings", filename: str, level: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "detailed",
        "filename": str(settings.log_dir / filename),
        "maxBytes": settings.log_max_bytes,
        "backupCount": settings.log_backup_count,
        "encoding": "utf-8",
    }


def get_logging_config(settings: "Settings") -> Dict[str, Any]:
    """
    Build the ``logging.config.dictConfig`` mapping.

    Args:
        settings: Settings providing environment, level and log directory

    Returns:
        Logging configuration dictionary
    """
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": "json" if settings.environment == "production" else "standard",
            "stream": sys.stdout,
        },
    }

    # No log files while testing
    if settings.environment != "testing":
        handlers["file"] = _rotating_file_handler(settings, "app.log", settings.log_level)
        handlers["error_file"] = _rotating_file_handler(settings, "error.log", "ERROR")

    server_logger = {"level": "INFO", "handlers": ["console"], "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(message)s"},
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": handlers,
        "loggers": {
            "": {
                "level": settings.log_level,
                "handlers": list(handlers),
                "propagate": False,
            },
            "uvicorn": dict(server_logger),
            "fastapi": dict(server_logger),
        },
    }


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def ensure_log_directories() -> None:
    """Create the log directory when file logging is enabled."""
    settings = get_settings()
    if settings.environment == "testing":
        return
    settings.log_dir.mkdir(parents=True, exist_ok=True)


# Initialize logging on import
ensure_log_directories()
setup_logging()
