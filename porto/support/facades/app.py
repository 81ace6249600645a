"""
App Facade
Provides static access to the application container
"""
from porto.support.facades.facade import Facade


class App(Facade):
    """
    Application Facade

    Example:
        # Get service from container
        porto = App.make('porto')

        # Check if service is bound
        if App.has('porto'):
            ...

        # Register singleton
        App.singleton('mailer', Mailer())
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        """Return 'app' to get the application itself"""
        return 'app'

    @classmethod
    def get_facade_root(cls):
        """Override to return app directly instead of resolving"""
        app = cls.get_app()
        if not app:
            raise RuntimeError(
                "Facade App cannot access application. "
                "Make sure to call Facade.set_app(app) during bootstrap."
            )
        return app
