"""
Logging Configuration
Provides structured logging with security features
"""
import logging
import logging.handlers
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, IO
from datetime import datetime


class SensitiveDataFilter(logging.Filter):
    """
    Filter to redact sensitive data from logs
    Generated URLs routinely carry signatures and tokens in their query
    strings, so those values are masked before a record is emitted
    """

    SENSITIVE_QUERY_PARAMS = [
        'token',
        'access_token',
        'refresh_token',
        'api_key',
        'apikey',
        'password',
        'passwd',
        'secret',
        'client_secret',
        'signature',
        'sig',
        'code',
    ]

    SENSITIVE_PATTERNS = {
        # Authorization headers
        'auth_header': r'(Authorization:\s+Bearer\s+)[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.?[A-Za-z0-9\-_.+/=]*',
    }

    def __init__(
        self,
        additional_params: Optional[List[str]] = None,
        additional_patterns: Optional[Dict[str, str]] = None
    ):
        """
        Initialize sensitive data filter

        Args:
            additional_params: Extra query parameter names whose values are redacted
            additional_patterns: Additional regex patterns to filter (name: pattern)
        """
        super().__init__()
        params = list(self.SENSITIVE_QUERY_PARAMS)
        if additional_params:
            params.extend(additional_params)

        # key=value pairs inside a query string: ?token=abc or &api_key=abc
        names = '|'.join(re.escape(p) for p in params)
        self.query_pattern = re.compile(rf'([?&](?:{names})=)[^&#\s"\']*', re.IGNORECASE)

        self.patterns = self.SENSITIVE_PATTERNS.copy()
        if additional_patterns:
            self.patterns.update(additional_patterns)

        self.compiled_patterns = {
            name: re.compile(pattern, re.IGNORECASE)
            for name, pattern in self.patterns.items()
        }

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log record to redact sensitive data

        Returns:
            True (always pass the record, but with redacted content)
        """
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self.redact(v) if isinstance(v, str) else v
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self.redact(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        # Structured extras such as extra={'url': ...}
        for key in ('url', 'location', 'target'):
            value = getattr(record, key, None)
            if isinstance(value, str):
                setattr(record, key, self.redact(value))

        return True

    def redact(self, text: str) -> str:
        """
        Redact sensitive data from text

        Returns:
            Text with sensitive data redacted
        """
        redacted = self.query_pattern.sub(r'\1[REDACTED]', text)

        for name, pattern in self.compiled_patterns.items():
            redacted = pattern.sub(r'\1[REDACTED]' if pattern.groups else '[REDACTED]', redacted)

        return redacted


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    RESERVED_ATTRS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'getMessage', 'message', 'taskName',
    ])

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Initialize JSON formatter

        Args:
            include_fields: Additional fields to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed via logger.debug(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """

    @staticmethod
    def setup_logger(
        name: Optional[str],
        format_type: Optional[str] = None,
        filter_sensitive: bool = True,
        additional_sensitive_params: Optional[List[str]] = None,
        stream: Optional[IO] = None,
        file_name: Optional[Path] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None
    ) -> logging.Logger:
        """
        Setup a logger with optional rotation and sensitive data filtering

        Args:
            name: Logger name (None for the root logger)
            format_type: Format type ('json' or 'text')
            filter_sensitive: Enable sensitive data filtering
            additional_sensitive_params: Extra query parameters to redact
            stream: Stream for the console handler (defaults to stderr)
            file_name: Optional log file, rotated by size
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('routecall.http', format_type='json')
        """
        from routecall.support import Config
        from routecall.defaults import (
            DEFAULT_APP_ENV,
            DEFAULT_LOG_FORMAT,
            DEFAULT_LOG_MAX_BYTES,
            DEFAULT_LOG_BACKUP_COUNT,
        )

        if format_type is None:
            format_type = Config.get('logging.LOG_FORMAT', DEFAULT_LOG_FORMAT)
        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        app_env = Config.get('app.APP_ENV', DEFAULT_APP_ENV)
        level = LoggerConfig.get_level_by_environment(app_env)

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        handlers: List[logging.Handler] = [logging.StreamHandler(stream)]
        if file_name is not None:
            Path(file_name).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                file_name,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            ))

        sensitive_filter = SensitiveDataFilter(additional_sensitive_params) if filter_sensitive else None
        for handler in handlers:
            handler.setFormatter(formatter)
            if sensitive_filter is not None:
                handler.addFilter(sensitive_filter)
            logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.DEBUG,
        }
        return levels.get(str(environment).lower(), logging.INFO)
