"""
Storage - Centralized path management (Laravel-style)
Provides consistent path resolution across the application
"""

import os
from pathlib import Path
from typing import Union


class Storage:
    """
    Centralized path management helper (Laravel-style)

    Directory structure:
    /
    ├── app/                    # Application code (root namespace 'app')
    │   └── containers/         # Porto containers
    │       └── Siteapp/
    │           ├── Actions/    # SwitchTemplateAction, ...
    │           └── Tasks/      # FindTemplateTask, ...
    ├── config/                 # Configuration files
    ├── storage/                # File storage
    │   └── logs/               # Log files
    └── .env
    """

    # Base directories
    _base_path: Path = None
    _storage_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """
        Initialize paths (should be called during app startup)

        Args:
            base_path: Application base directory (defaults to current working directory)
        """
        if base_path is None:
            base_path = os.getcwd()

        cls._base_path = Path(base_path).resolve()
        cls._storage_path = cls._base_path / 'storage'

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Get application base path

        Example:
            Storage.base('app', 'containers')  # /project/app/containers
        """
        if cls._base_path is None:
            cls.initialize()

        if paths:
            clean_paths = [p.lstrip('/') for p in paths]
            return cls._base_path.joinpath(*clean_paths)
        return cls._base_path

    @classmethod
    def app(cls, *paths: str) -> Path:
        """Get app path (app/)"""
        return cls.base('app', *paths)

    @classmethod
    def containers(cls, *paths: str) -> Path:
        """Get containers path (app/containers/)"""
        from porto.defaults import DEFAULT_CONTAINERS_DIRECTORY
        return cls.app(DEFAULT_CONTAINERS_DIRECTORY, *paths)

    # === Storage Paths ===

    @classmethod
    def storage(cls, *paths: str) -> Path:
        """
        Get storage path

        Example:
            Storage.storage('logs')  # storage/logs
        """
        if cls._storage_path is None:
            cls.initialize()

        if paths:
            clean_paths = [p.lstrip('/') for p in paths]
            return cls._storage_path.joinpath(*clean_paths)
        return cls._storage_path

    @classmethod
    def logs(cls, *paths: str) -> Path:
        """Get logs path (storage/logs/)"""
        return cls.storage('logs', *paths)

    # === Helpers ===

    @classmethod
    def directory_exists(cls, path: Union[str, Path]) -> bool:
        """Check that path exists and is a directory"""
        return Path(path).is_dir()

    @classmethod
    def ensure_directory(cls, path: Union[str, Path]) -> Path:
        """
        Ensure directory exists, create if it doesn't

        Args:
            path: Directory path

        Returns:
            Path object
        """
        path_obj = Path(path)
        path_obj.mkdir(parents=True, exist_ok=True)
        return path_obj
