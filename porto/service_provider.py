"""
Service Provider Base Class
Laravel-style service providers for registering services in the container
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from porto.application import Application


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers are the central place for application bootstrapping:
    - register() binds services in the container
    - boot() runs once every provider has been registered
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Register services in the container
        Called when the provider is registered (before booting)

        Example:
            self.app.singleton('porto', lambda app: Core(app))
        """
        pass

    def boot(self):
        """Bootstrap services (after all providers are registered)"""
        pass
