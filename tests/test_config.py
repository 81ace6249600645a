"""
Configuration tests.

Config reads config/<file>.py from the project root; EnvHelper reads .env.
"""

from porto.support import Config, EnvHelper


PORTO_CONFIG = '''
APP_PATH = '/srv/project/app'
ROOT_NAMESPACE = 'project'
CONTAINERS = {'Siteapp': {'enabled': True}}
'''


class TestConfig:
    """Dot notation access over config modules."""

    def test_get_from_config_file(self, write_file) -> None:
        write_file('config/__init__.py')
        write_file('config/porto.py', PORTO_CONFIG)

        assert Config.get('porto.APP_PATH') == '/srv/project/app'

    def test_get_is_case_insensitive(self, write_file) -> None:
        write_file('config/__init__.py')
        write_file('config/porto.py', PORTO_CONFIG)

        assert Config.get('PORTO.root_namespace') == 'project'

    def test_get_nested_dict(self, write_file) -> None:
        write_file('config/__init__.py')
        write_file('config/porto.py', PORTO_CONFIG)

        assert Config.get('porto.containers.siteapp.enabled') is True

    def test_missing_key_returns_default(self, write_file) -> None:
        write_file('config/__init__.py')
        write_file('config/porto.py', PORTO_CONFIG)

        assert Config.get('porto.MISSING', 'fallback') == 'fallback'
        assert Config.get('porto.containers.ghost.enabled', False) is False

    def test_missing_file_returns_default(self, project) -> None:
        assert Config.get('nowhere.key', 42) == 42
        assert Config.all('nowhere') is None

    def test_runtime_override_wins(self, write_file) -> None:
        write_file('config/__init__.py')
        write_file('config/porto.py', PORTO_CONFIG)

        Config.set('porto.ROOT_NAMESPACE', 'override')

        assert Config.get('porto.root_namespace') == 'override'
        assert Config.has('porto.root_namespace')

        Config.clear_runtime_overrides()
        assert Config.get('porto.root_namespace') == 'project'


class TestEnvHelper:
    """.env loading through python-dotenv."""

    def test_reads_env_file(self, project, write_file, monkeypatch) -> None:
        # values loaded from .env are removed on teardown
        for key in ('PORTO_TEST_FLAG', 'PORTO_TEST_COUNT'):
            monkeypatch.setenv(key, '')
            monkeypatch.delenv(key)
        write_file('.env', 'PORTO_TEST_FLAG=yes\nPORTO_TEST_COUNT=3\n')

        EnvHelper.load(project / '.env')

        assert EnvHelper.get('PORTO_TEST_FLAG') == 'yes'
        assert EnvHelper.get_bool('PORTO_TEST_FLAG') is True
        assert EnvHelper.get_int('PORTO_TEST_COUNT') == 3
        assert EnvHelper.has('PORTO_TEST_COUNT')

    def test_missing_env_file_is_not_created(self, project) -> None:
        assert EnvHelper.load(project / '.env') is False
        assert not (project / '.env').exists()

    def test_defaults(self, project, monkeypatch) -> None:
        monkeypatch.delenv('PORTO_TEST_MISSING', raising=False)
        monkeypatch.setenv('PORTO_TEST_NOT_INT', 'abc')

        assert EnvHelper.get('PORTO_TEST_MISSING', 'default') == 'default'
        assert EnvHelper.get_bool('PORTO_TEST_MISSING', True) is True
        assert EnvHelper.get_int('PORTO_TEST_NOT_INT', 7) == 7
