"""Logging configuration using loguru.

The library itself only emits records through ``loguru.logger``; applications
call ``setup_logging`` or ``configure_logging_from_config`` to install sinks.
"""

import sys
from pathlib import Path

from loguru import logger

from ..config.loader import get_config


def setup_logging(
    level: str = "INFO",
    format_type: str = "text",
    file_path: str | None = None,
    max_file_size_mb: int = 100,
    backup_count: int = 5,
    include_timestamps: bool = True,
) -> None:
    """Replace loguru's handlers with a console sink and an optional file sink.

    Invalid level names fall back to 'INFO'.
    """
    logger.remove()

    format_parts = []
    if include_timestamps:
        format_parts.append("<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>")
    format_parts.append("<level>{level: <8}</level>")
    format_parts.append("<cyan>{name}</cyan>")
    format_parts.append("<level>{message}</level>")

    if format_type == "json":
        log_format = "{message}"
        serialize = True
    else:
        log_format = " | ".join(format_parts)
        serialize = False

    try:
        logger.level(level)
        safe_level = level
    except ValueError:
        safe_level = "INFO"

    logger.add(
        sys.stderr,
        level=safe_level,
        format=log_format,
        serialize=serialize,
        colorize=format_type != "json",
    )
    if safe_level != level:
        logger.warning(f"Invalid logging level '{level}' provided; falling back to 'INFO'")

    if file_path:
        log_file_path = Path(file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file_path,
            level=safe_level,
            format=log_format,
            serialize=serialize,
            rotation=f"{max_file_size_mb} MB",
            retention=backup_count,
            encoding="utf-8",
        )


def configure_logging_from_config() -> None:
    """Configure logging using the current configuration."""
    config = get_config()

    setup_logging(
        level=config.logging.level,
        format_type=config.logging.format,
        file_path=config.logging.file_path,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        include_timestamps=config.logging.include_timestamps,
    )
