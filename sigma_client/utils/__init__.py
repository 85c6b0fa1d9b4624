"""Utility helpers."""

from .logging_config import configure_logging_from_config, setup_logging


__all__ = ["configure_logging_from_config", "setup_logging"]
