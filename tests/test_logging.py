"""
Logging tests.

Covers logger name resolution, the JSON formatter and channel setup.
"""

import json
import logging

import pytest

from porto.logging import JSONFormatter, LoggerConfig, getLogger
from porto.providers import LoggingServiceProvider
from porto.support import Config


LOGGING_CONFIG = '''
CHANNELS = {
    'porto': {'name': 'porto', 'file_name': 'porto', 'format': 'text'},
}
'''


@pytest.fixture
def channels(write_file):
    write_file('config/__init__.py')
    write_file('config/logging.py', LOGGING_CONFIG)
    yield
    logger = logging.getLogger('porto')
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestGetLogger:
    """Name resolution."""

    def test_module_names_are_kept(self, project) -> None:
        assert getLogger('porto.core').name == 'porto.core'

    def test_unknown_plain_name_falls_back_to_root(self, project) -> None:
        assert getLogger('random') is logging.getLogger()

    def test_configured_channel_is_allowed(self, project, channels) -> None:
        assert getLogger('porto').name == 'porto'

    def test_none_is_root(self, project) -> None:
        assert getLogger() is logging.getLogger()


class TestJSONFormatter:
    """Structured output."""

    def test_format_includes_core_fields_and_extra(self) -> None:
        record = logging.LogRecord(
            name='porto.core', level=logging.DEBUG, pathname=__file__, lineno=10,
            msg='Resolved %s', args=('mailer',), exc_info=None
        )
        record.lookup_key = 'mailer'

        payload = json.loads(JSONFormatter().format(record))

        assert payload['level'] == 'DEBUG'
        assert payload['logger'] == 'porto.core'
        assert payload['message'] == 'Resolved mailer'
        assert payload['lookup_key'] == 'mailer'


class TestLoggerConfig:
    """File handlers under storage/logs."""

    def test_level_by_environment(self) -> None:
        assert LoggerConfig.get_level_by_environment('production') == logging.WARNING
        assert LoggerConfig.get_level_by_environment('Development') == logging.DEBUG
        assert LoggerConfig.get_level_by_environment('unknown') == logging.INFO

    def test_provider_sets_up_channel_file(self, project, channels, app) -> None:
        Config.set('app.APP_ENV', 'development')

        app.register_provider(LoggingServiceProvider)
        logger = logging.getLogger('porto')
        logger.debug('channel ready')
        for handler in logger.handlers:
            handler.flush()

        log_file = project / 'storage' / 'logs' / 'porto.log'
        assert log_file.exists()
        assert 'channel ready' in log_file.read_text(encoding='utf-8')
        assert logger.propagate is False
