"""
Exceptions Package
Framework exception hierarchy
"""
from routecall.exceptions.custom import (
    FrameworkException,
    InvalidArgumentException,
)

__all__ = [
    'FrameworkException',
    'InvalidArgumentException',
]
