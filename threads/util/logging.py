"""Logging configuration for the application."""

import logging
import sys

from threads.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the server process.

    Logfire handles structured application logs; this sets levels for the
    libraries that still log through the standard logging module.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    # SQL echo is controlled by engine echo=settings.debug
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("threads").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
