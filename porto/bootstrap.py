"""
Application Bootstrap
Creates the application, registers the framework providers and wires the facades
"""
from typing import Optional

from porto.application import Application
from porto.providers import LoggingServiceProvider, PortoServiceProvider
from porto.support.facades import Facade

DEFAULT_PROVIDERS = [
    LoggingServiceProvider,
    PortoServiceProvider,
]


def create_app(base_path: Optional[str] = None, providers=None) -> Application:
    """
    Create and boot an application

    Args:
        base_path: Project root holding app/, config/ and .env (defaults to cwd)
        providers: Provider classes to register (defaults to DEFAULT_PROVIDERS)

    Example:
        app = create_app('/srv/project')
        Porto.call('Siteapp@SwitchTemplateAction', [42, 7])
    """
    app = Application(base_path)

    for provider_class in providers if providers is not None else DEFAULT_PROVIDERS:
        app.register_provider(provider_class)

    Facade.set_app(app)
    app.boot()

    return app
