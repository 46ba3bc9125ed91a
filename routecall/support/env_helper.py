"""
EnvHelper - Read .env files into the process environment
Laravel-style environment variable access
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable manager with .env file support

    Usage:
        # Read
        source = EnvHelper.get('APP_URL_TOKEN_SOURCE', 'secure')

        # Load
        EnvHelper.load(Path('/path/to/.env'))
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path: Optional[Path] = None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
        """
        if env_path is None:
            env_path = Path.cwd() / '.env'

        cls._env_path = Path(env_path)

    @classmethod
    def load(cls, env_path: Optional[Path] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to initialized path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True

            # A missing .env is not an error, the process environment still applies
            if not cls._env_path.exists():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            Variable value or default
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def reset(cls):
        """Forget the loaded state so the next access reloads the .env file"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False
