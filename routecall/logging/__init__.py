"""
Logging Package
Structured JSON logging with URL redaction
"""
from routecall.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger for a routecall module

    Module names ('routecall.http.tokens') and Sanic's own loggers
    ('sanic.access') are returned as-is; None and bare names resolve to the
    root logger, so handlers installed by LoggerConfig.setup_logger(None)
    catch everything.

    Example:
        logger = getLogger(__name__)
        logger.debug("Uniquified call url", extra={'url': url})
    """
    if name is None or '.' not in name:
        return logging.getLogger()

    return logging.getLogger(name)
