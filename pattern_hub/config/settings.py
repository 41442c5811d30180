"""
Settings
Configuration management for Pattern Hub MCP servers.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file
load_dotenv()


DEFAULT_CATALOG = "crm-base"

_TRUTHY = {"1", "true", "yes", "on"}


def get_env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def get_http_port() -> int:
    return int(os.getenv("MCP_PORT", os.getenv("HTTP_PORT", "8000")))


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    catalog: str = DEFAULT_CATALOG
    strict_prompt_arguments: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


class ConfigManager:
    """Configuration manager - loads and provides config."""

    def __init__(self, config: Optional[Config] = None):
        self._config: Optional[Config] = config

    @staticmethod
    def from_env() -> Config:
        env = os.getenv("ENVIRONMENT", "development")
        return Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            http_host=os.getenv("MCP_HOST", "0.0.0.0"),
            http_port=get_http_port(),
            catalog=os.getenv("PATTERN_HUB_CATALOG", DEFAULT_CATALOG),
            strict_prompt_arguments=get_env_flag("PATTERN_HUB_STRICT_PROMPTS"),
        )

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            self._config = self.from_env()
        return self._config
