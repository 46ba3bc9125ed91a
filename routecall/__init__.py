"""
routecall
Reverse-routed HTTP calls for Sanic applications
"""
from routecall.http import Call, ResponseHelper
from routecall.exceptions import FrameworkException, InvalidArgumentException

__version__ = '1.0.0'

__all__ = [
    'Call',
    'ResponseHelper',
    'FrameworkException',
    'InvalidArgumentException',
]
