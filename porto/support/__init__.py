"""
Framework Support Classes
"""

from porto.support.storage import Storage
from porto.support.env_helper import EnvHelper
from porto.support.config import Config
from porto.support.class_loader import ClassLoader
from porto.support.str import Str

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'ClassLoader',
    'Str',
]
