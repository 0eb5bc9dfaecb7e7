"""
Centralized Logging Service for the Site CMS Backend

This module provides a unified logging interface with:
- Structured JSON output
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- File rotation (prevents disk fill)
- Console output
- Contextual logging with extra fields (post_id, user_id, storage_path, etc.)


Usage:
    from sitecms.services.system.logger_service import get_logger

    logger = get_logger(__name__)
    logger.info("Post updated", extra={"post_id": "abc123", "admin_id": "user456"})
    logger.error("Database error", extra={"error": str(e)}, exc_info=True)
"""

import logging
import json
import sys
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional
from pathlib import Path

from flask import g, has_request_context

# LogRecord attributes that are never copied into structured output
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName',
    'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'extra_fields', 'taskName',
])

# Rotating file size and count for both file handlers
LOG_FILE_MAX_BYTES = 50 * 1024 * 1024
LOG_FILE_BACKUPS = 10


def _infer_service(logger_name: str) -> str:
    """`sitecms.features.posts.service.x` -> `posts`; `sitecms.services.firebase.x` -> `firebase`."""
    parts = logger_name.split('.') if logger_name else []
    for marker in ('features', 'services'):
        if marker in parts:
            idx = parts.index(marker)
            if idx + 1 < len(parts):
                return parts[idx + 1]
    return parts[0] if parts else 'unknown'


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields passed via extra={} on the logging call."""
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS}


def _current_request_id() -> Optional[str]:
    # Set per request by app.py; absent outside a request (startup, background threads)
    if not has_request_context():
        return None
    return getattr(g, 'request_id', None)


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.
    Outputs logs in JSON format for easy parsing by log aggregation tools.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'component': 'backend',
            'service': _infer_service(record.name),
        }
        request_id = _current_request_id()
        if request_id:
            log_data['request_id'] = request_id

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for key, value in _extra_fields(record).items():
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = str(value)

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Colored one-line output for local development."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        timestamp = datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')
        message = record.getMessage()

        extras = ' '.join(f"{key}={value}" for key, value in _extra_fields(record).items())
        if extras:
            message = f"{message} | {extras}"

        # [2024-11-16 10:30:45] INFO     [sitecms.features.posts...] Post CREATE
        line = f"[{timestamp}] {color}{record.levelname:8s}{self.COLORS['RESET']} [{record.name}] {message}"
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


class LoggerService:
    """
    Centralized logger service singleton.
    Manages all logging configuration and provides logger instances.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LoggerService, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._initialize_logging()
            LoggerService._initialized = True

    def _resolve_log_dir(self) -> Path:
        configured = os.getenv('LOG_DIR')
        if configured:
            return Path(configured).expanduser()
        return Path(__file__).resolve().parents[3] / 'logs'

    def _initialize_logging(self):
        """Set up logging configuration"""
        log_dir = self._resolve_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
        log_level = getattr(logging, log_level_str, logging.INFO)

        environment = os.getenv('ENVIRONMENT', 'development').lower()

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()

        json_log = log_dir / 'sitecms.json.log'
        text_log = log_dir / 'sitecms.log'
        handlers = [
            (RotatingFileHandler(json_log, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS,
                                 encoding='utf-8'), JSONFormatter()),
            (RotatingFileHandler(text_log, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS,
                                 encoding='utf-8'),
             logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S')),
        ]
        if environment == 'development':
            handlers.append((logging.StreamHandler(sys.stdout), ConsoleFormatter()))

        for handler, formatter in handlers:
            handler.setLevel(log_level)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)

        logging.getLogger('werkzeug').setLevel(logging.ERROR)
        logging.getLogger('urllib3').setLevel(logging.WARNING)

        init_logger = logging.getLogger(__name__)
        init_logger.info(
            "Logging initialized",
            extra={
                'environment': environment,
                'log_level': log_level_str,
                'log_dir': str(log_dir),
                'json_log': str(json_log),
                'text_log': str(text_log)
            }
        )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Upload started", extra={"storage_path": "uploads/1_a.jpg"})
    """
    LoggerService()
    return logging.getLogger(name)


def log_content_operation(logger: logging.Logger, operation: str, resource_type: str,
                          resource_id: Optional[str], admin_id: Optional[str] = None, **kwargs):
    """
    Helper to log CMS content operations with consistent format.

    Args:
        logger: Logger instance
        operation: Operation type (CREATE, UPDATE, DELETE, etc.)
        resource_type: Content type (post, service, slide, product, ...)
        resource_id: Firestore document ID
        admin_id: Optional admin user ID
        **kwargs: Additional context
    """
    logger.info(
        f"{resource_type.capitalize()} {operation}",
        extra={
            'operation': operation,
            'resource_type': resource_type,
            'resource_id': resource_id,
            'admin_id': admin_id,
            **kwargs
        }
    )


def log_upload_operation(logger: logging.Logger, provider: str, file_name: str,
                         success: bool, **kwargs):
    """
    Helper to log image upload attempts with consistent format.

    Args:
        logger: Logger instance
        provider: Upload provider (firebase, imgbb, cloudinary, data_url)
        file_name: Original file name
        success: Whether the attempt succeeded
        **kwargs: Additional context
    """
    level = logging.INFO if success else logging.WARNING
    logger.log(
        level,
        f"Upload via {provider} {'succeeded' if success else 'failed'}",
        extra={
            'upload_provider': provider,
            'file_name': file_name,
            'upload_success': success,
            'resource_type': 'image',
            **kwargs
        }
    )


def log_error(logger: logging.Logger, error: Exception, context: Optional[Dict[str, Any]] = None):
    """
    Helper to log errors with full context and traceback.

    Args:
        logger: Logger instance
        error: Exception object
        context: Optional context dictionary
    """
    logger.error(
        f"Error: {str(error)}",
        extra={
            'error_type': type(error).__name__,
            'error_message': str(error),
            **(context or {})
        },
        exc_info=True
    )


# Initialize logging when module is imported
_logger_service = LoggerService()
