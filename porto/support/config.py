"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Optional, Dict

_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        app_path = Config.get('porto.app_path')

        # With default
        namespace = Config.get('porto.root_namespace', 'app')

        # Set runtime value
        Config.set('app.debug', True)

    Config files should be in config/ directory of the application:
        config/
        ├── app.py          # APP_ENV, APP_DEBUG
        ├── logging.py      # CHANNELS
        └── porto.py        # APP_PATH, ROOT_NAMESPACE
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'porto.root_namespace')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            Config.get('porto.ROOT_NAMESPACE', 'app')
            Config.get('PORTO.root_namespace', 'app')  # Same result
        """
        key_lower = key.lower()

        # Runtime overrides win over files
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        file_name, *path = key_lower.split('.')

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)
        if value is None:
            return default

        for part in path:
            value = cls._lookup(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _lookup(container: Any, part: str) -> Any:
        """Case-insensitive attribute or dict key lookup"""
        if isinstance(container, dict):
            for dict_key in container.keys():
                if str(dict_key).lower() == part:
                    return container[dict_key]
            return _MISSING

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return getattr(container, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from config/ directory

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('porto.app_path', '/srv/project/app')
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """
        Get all configuration from a file

        Returns:
            Config module or None
        """
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to forget all loaded files
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
