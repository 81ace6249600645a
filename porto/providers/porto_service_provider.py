"""
Porto Service Provider
Registers the container caller
"""
from porto.core import Core
from porto.defaults import DEFAULT_PORTO_BINDING, DEFAULT_ROOT_NAMESPACE
from porto.service_provider import ServiceProvider
from porto.support import Config, EnvHelper, Storage


class PortoServiceProvider(ServiceProvider):
    """Porto service provider - binds the caller as the 'porto' singleton"""

    def register(self):
        self.app.singleton(DEFAULT_PORTO_BINDING, self.make_core)

    def make_core(self, app) -> Core:
        """
        Build the caller from configuration

        Application root: porto.APP_PATH config, then APP_PATH env, then app/.
        Relative roots are taken from the project base path.
        """
        app_path = Config.get('porto.APP_PATH') or EnvHelper.get('APP_PATH')
        app_path = Storage.base() / app_path if app_path else Storage.app()
        root_namespace = Config.get('porto.ROOT_NAMESPACE', DEFAULT_ROOT_NAMESPACE)

        return Core(app, app_path=app_path, root_namespace=root_namespace)
