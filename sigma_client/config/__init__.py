"""Configuration loading utilities."""

from .loader import get_config, load_config_from_files, reload_config
from .schemas import ClientConfig, LoggingConfig, SigmaConfig, SigmaCredentials


__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "SigmaConfig",
    "SigmaCredentials",
    "get_config",
    "load_config_from_files",
    "reload_config",
]
