"""Centralized logging configuration using Loguru."""

import sys
from typing import Any

from loguru import logger

from element_finder.core.config import settings


def setup_logging() -> None:
    """Configure Loguru logging for scripts built on the library."""
    # Remove default handler
    logger.remove()

    # Console format
    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # File format (more detailed)
    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} | "
        "{message} | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug,
    )

    if settings.log_to_file:
        logger.add(
            settings.logs_dir / "element_finder_{time:YYYY-MM-DD}.log",
            format=file_format,
            level="DEBUG",
            rotation="00:00",  # Rotate at midnight
            retention="14 days",
            compression="gz",
            backtrace=True,
            diagnose=True,
        )

    logger.info(
        f"{settings.app_name} logging initialized | level={settings.log_level} | file={settings.log_to_file}"
    )


def get_logger(name: str) -> Any:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


def log_load_event(document_type: str, size: int, errors_count: int, **extra: Any) -> None:
    """Log document load event.

    Args:
        document_type: Type of the loaded document (html, xml)
        size: Length of the source markup
        errors_count: Number of parser errors collected while loading
        **extra: Additional context
    """
    status = "CLEAN" if errors_count == 0 else "RECOVERED"

    logger.bind(document_type=document_type, size=size, errors_count=errors_count, **extra).debug(
        f"Document loaded | type={document_type} | size={size} | "
        f"errors={errors_count} | status={status}"
    )
