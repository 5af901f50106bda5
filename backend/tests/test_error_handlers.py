"""
Tests for utils/error_handlers.py - exception to HTTP status translation
"""
import asyncio

import pytest
from fastapi import HTTPException

from exceptions import ApplicationError, ConfigurationError, NotFoundError, StorageError, ValidationError
from utils.error_handlers import handle_api_errors, to_http_exception


@pytest.mark.parametrize("error, status", [
    (NotFoundError("Company", 1), 404),
    (ValidationError("bad payload", {"name": "blank"}), 400),
    (StorageError("add_company", "constraint failed"), 500),
    (ConfigurationError("bad level"), 500),
    (ApplicationError("boom"), 500),
    (RuntimeError("unexpected"), 500),
])
def test_status_codes(error, status):
    assert to_http_exception("Op", error).status_code == status


def test_not_found_detail_is_message():
    exc = to_http_exception("Get company", NotFoundError("Company", 3))

    assert exc.detail == "Company '3' not found"


def test_unexpected_error_hides_internals():
    exc = to_http_exception("List companies", KeyError("secret"))

    assert "secret" not in exc.detail
    assert exc.detail.startswith("List companies failed")


def test_sync_wrapper_translates():
    @handle_api_errors("Delete company")
    def endpoint():
        raise NotFoundError("Company", 9)

    with pytest.raises(HTTPException) as exc_info:
        endpoint()

    assert exc_info.value.status_code == 404
    assert isinstance(exc_info.value.__cause__, NotFoundError)


def test_async_wrapper_translates():
    @handle_api_errors("Create company")
    async def endpoint():
        raise StorageError("add_company", "disk full")

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(endpoint())

    assert exc_info.value.status_code == 500
    assert "disk full" in exc_info.value.detail


def test_http_exception_passes_through():
    @handle_api_errors("Anything")
    def endpoint():
        raise HTTPException(status_code=418, detail="teapot")

    with pytest.raises(HTTPException) as exc_info:
        endpoint()

    assert exc_info.value.status_code == 418


def test_return_value_preserved():
    @handle_api_errors("Anything")
    def endpoint(x):
        return x * 2

    assert endpoint(21) == 42
