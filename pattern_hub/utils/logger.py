"""
Logger
Structured logging for Pattern Hub MCP servers.

Logs go to stderr; stdout belongs to the stdio transport.
"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name or number to a logging level. Unknown names mean DEBUG."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.DEBUG)


class Logger:
    """Thin wrapper over a named stdlib logger with one stderr handler."""

    def __init__(self, name: str = "pattern-hub", level: Union[str, int] = "DEBUG"):
        self.logger = logging.getLogger(name)
        self.level = resolve_level(level)
        self.logger.setLevel(self.level)

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

        # Catalog servers re-create loggers by name; keep the handler in step
        for handler in self.logger.handlers:
            handler.setLevel(self.level)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)

    def exception(self, message: str, extra: Optional[dict] = None):
        """Log at ERROR with the active exception's traceback."""
        self.logger.exception(message, extra=extra)
