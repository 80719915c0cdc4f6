"""Configuration management for the Hacker News API client."""

from .loader import Config, load_config, save_config
from .models import DEFAULT_BASE_URL, ClientConfig, ConfigModel, LoggingConfig

__all__ = [
    "Config",
    "ConfigModel",
    "ClientConfig",
    "LoggingConfig",
    "DEFAULT_BASE_URL",
    "load_config",
    "save_config",
]
