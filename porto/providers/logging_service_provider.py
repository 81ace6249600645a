"""
Logging Service Provider
Initializes application-wide structured logging
"""
from porto.service_provider import ServiceProvider
from porto.logging.logger_config import LoggerConfig
from porto.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up the configured log channels"""

    def register(self):
        """Register logging services"""
        self.setup_channels()

    def setup_channels(self):
        """
        Setup every channel from logging.CHANNELS

        Example config/logging.py:
            CHANNELS = {
                'porto': {'name': 'porto', 'file_name': 'porto', 'format': 'text'},
            }
        """
        channels = Config.get('logging.CHANNELS', {}) or {}

        for channel_key, channel_config in channels.items():
            LoggerConfig.setup_logger(
                name=channel_config.get('name'),
                format_type=channel_config.get('format'),
                file_name=channel_config.get('file_name', channel_key)
            )
