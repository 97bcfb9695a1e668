"""Configuration management module for proxymap."""

from .manager import ConfigManager
from .templates import DEFAULT_CONFIG_PATH, DEFAULT_CONFIG_TEMPLATE

__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_TEMPLATE",
]
