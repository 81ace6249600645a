"""
Logging Configuration
Provides structured logging for the framework
"""
import logging
import logging.handlers
import json
from typing import List, Optional
from datetime import datetime

# LogRecord attributes that are not user supplied "extra" fields
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'message',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs one JSON object per record for easy parsing and analysis
    """

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Args:
            include_fields: Additional record attributes to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed via logger.debug(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    @staticmethod
    def setup_logger(
        name: Optional[str],
        format_type: Optional[str] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
        file_name: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup a logger with a rotating file handler under storage/logs

        Args:
            name: Logger name (None for the root logger)
            format_type: Format type ('json' or 'text')
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep
            file_name: Log file name without extension (defaults to logger name)

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('porto', format_type='text')
        """
        from porto.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FORMAT
        from porto.support import Config, Storage

        format_type = format_type or DEFAULT_LOG_FORMAT
        max_bytes = max_bytes if max_bytes is not None else DEFAULT_LOG_MAX_BYTES
        backup_count = backup_count if backup_count is not None else DEFAULT_LOG_BACKUP_COUNT

        app_env = Config.get('app.APP_ENV', 'local')
        app_debug = Config.get('app.APP_DEBUG', False)

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(app_env))

        # Clear existing handlers
        logger.handlers.clear()

        log_file = Storage.logs(f"{file_name or name or 'application'}.log")
        Storage.ensure_directory(log_file.parent)

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if app_debug:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'local': logging.DEBUG,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
