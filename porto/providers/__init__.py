"""
Service Providers
"""
from porto.providers.logging_service_provider import LoggingServiceProvider
from porto.providers.porto_service_provider import PortoServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'PortoServiceProvider',
]
