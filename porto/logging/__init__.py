"""
Logging Package
Structured logging for the framework

Provides a drop-in replacement for logging.getLogger that plays well with
the channels configured by LoggingServiceProvider.
"""
from porto.logging.logger_config import LoggerConfig, JSONFormatter
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - Configured in logging.CHANNELS (e.g., 'porto')
    - Module-based names (containing '.') like 'porto.core'

    Any other name falls back to the root logger.

    Example:
        from porto.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Resolved class", extra={'key': lookup_key})
    """
    if name is not None and '.' not in name:
        from porto.support import Config
        channels = Config.get('logging.CHANNELS', {}) or {}

        allowed_names = [
            channel.get('name')
            for channel in channels.values()
            if channel.get('name') is not None
        ]

        if name not in allowed_names:
            name = None

    return logging.getLogger(name)
