"""
Framework Support Classes
"""

from routecall.support.env_helper import EnvHelper
from routecall.support.config import Config

__all__ = [
    'EnvHelper',
    'Config',
]
