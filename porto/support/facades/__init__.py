"""
Facades Package
Laravel-style facades for static access to services
"""
from porto.support.facades.facade import Facade
from porto.support.facades.app import App
from porto.support.facades.porto import Porto

__all__ = [
    'Facade',
    'App',
    'Porto',
]
