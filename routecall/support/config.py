"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Optional, Dict

from routecall.support.env_helper import EnvHelper

_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        source = Config.get('app.URL_TOKEN_SOURCE', 'secure')

        # Set runtime value
        Config.set('app.URL_TOKEN_SEED', 42)

        # Check existence
        if Config.has('app.URL_TOKEN_SEED'):
            ...

    Values are resolved in order: runtime overrides, config/<file>.py modules,
    environment variables (app.url_token_source -> APP_URL_TOKEN_SOURCE),
    then the supplied default.

    Config files should be in config/ directory:
        config/
        ├── app.py
        └── logging.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'app.URL_TOKEN_SOURCE')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            source = Config.get('app.url_token_source', 'secure')
            source = Config.get('APP.URL_TOKEN_SOURCE', 'secure')  # Same result
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._lookup(cls._loaded.get(file_name), parts[1:])
        if value is not _MISSING:
            return value

        env_value = EnvHelper.get('_'.join(parts).upper())
        if env_value is not None:
            return env_value

        return default

    @staticmethod
    def _lookup(value: Any, path: list) -> Any:
        """Navigate module attributes and dict keys case-insensitively"""
        if value is None:
            return _MISSING

        for part in path:
            if isinstance(value, dict):
                candidates = value.keys()
                matched = next((k for k in candidates if str(k).lower() == part), _MISSING)
                if matched is _MISSING:
                    return _MISSING
                value = value[matched]
            elif hasattr(value, '__dict__'):
                matched = next((name for name in dir(value) if name.lower() == part), _MISSING)
                if matched is _MISSING:
                    return _MISSING
                value = getattr(value, matched)
            else:
                return _MISSING

        return value

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
            Config.set('app.URL_TOKEN_SOURCE', 'seeded')
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
        file_name = file_name.lower()
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name.lower(), None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
