"""
Error handling decorators and utilities for API endpoints.

Application exceptions raised by the service layer are translated here into
HTTPExceptions, so endpoints never build error responses themselves.
"""

import inspect
from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from constants import HTTPStatus
from exceptions import (
    ConfigurationError,
    ValidationError,
    NotFoundError,
    StorageError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised during an API operation to an HTTPException.

    Client errors are logged as warnings, server errors as errors with traceback.

    Args:
        operation_name: Human-readable name of the operation
        error: The exception that was raised

    Returns:
        HTTPException carrying the status code and detail for the client
    """
    if isinstance(error, NotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)

    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)

    if isinstance(error, StorageError):
        logger.error(f"{operation_name} - Storage error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )

    if isinstance(error, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Service misconfigured: {error.message}"
        )

    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create company")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/companies/{company_id}")
        @handle_api_errors("Get company")
        def get_company(...):
            return service.get_by_id(company_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
