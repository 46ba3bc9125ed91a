"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class InvalidArgumentException(FrameworkException, ValueError):
    """
    Invalid argument exception

    Raised at the API boundary when a caller passes a value that cannot
    produce a well-formed URL (missing host, missing url, unknown token source)

    Example:
        raise InvalidArgumentException("Host is required to build an absolute URL")
    """
    status_code = 500
    message = "Invalid argument"
