"""
Structured Logging Utilities

Provides logging configuration and utilities for adding structured context
to log messages, improving observability and debugging.
"""

import inspect
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Argument names copied into the log context by log_operation
CONTEXT_ARG_NAMES = ("company_id",)

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


def configure_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger with a console handler and an optional rotating file.

    Calling this more than once replaces the handlers installed by the previous call.

    Args:
        level: Log level name
        log_file: Path of the rotating log file (10MB per file, 5 backups)
    """
    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        if getattr(handler, "_company_registry", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler._company_registry = True
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler._company_registry = True
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Company created", extra={
            "company_id": company.id,
            "operation": "add_company",
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(request_id="abc-123")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _extract_context(func, operation_name: str, args, kwargs) -> Dict[str, Any]:
    """Build the log context from the call's bound arguments."""
    context = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return context
    for key in CONTEXT_ARG_NAMES:
        if key in bound.arguments:
            context[key] = bound.arguments[key]
    return context


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start/end with structured context.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("delete_company")
        def delete_company(self, company_id: int):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _extract_context(func, operation_name, args, kwargs)

            logger.info(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)
                raise

        return wrapper

    return decorator
