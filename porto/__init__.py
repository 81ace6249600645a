"""
Porto Package
Convention-based container caller: Porto.call('Container@ClassName', [...])
"""

from porto.application import Application
from porto.bootstrap import create_app
from porto.core import Core
from porto.helpers import porto_call
from porto.support.facades import Porto

__all__ = [
    'Application',
    'Core',
    'Porto',
    'create_app',
    'porto_call',
]
