"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, DEFAULT_CATALOG, get_env_flag

__all__ = [
    "ConfigManager",
    "Config",
    "DEFAULT_CATALOG",
    "get_env_flag",
]
