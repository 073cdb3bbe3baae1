"""
Loguru logging configuration shared by the API and the dashboard.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

from employment_dashboard.config import Settings, get_settings

HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
PLAIN_FORMAT = "{time} | {level} | {name}:{function}:{line} | {message}"

_configured = False


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to Loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: Optional[Settings] = None, force: bool = False) -> None:
    """Configure Loguru sinks once per process."""
    global _configured
    if _configured and not force:
        return
    settings = settings or get_settings()

    logger.remove()
    if settings.log_json:
        logger.add(sys.stderr, format=PLAIN_FORMAT, level=settings.log_level, serialize=True)
    else:
        logger.add(sys.stderr, format=HUMAN_FORMAT, level=settings.log_level, colorize=True)

    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="00:00",
            retention="30 days",
            level=settings.log_level,
            format=PLAIN_FORMAT,
            serialize=settings.log_json,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logging.getLogger(logger_name).handlers = [InterceptHandler()]

    _configured = True
    logger.info("Logging configured: level={}, json={}", settings.log_level, settings.log_json)
