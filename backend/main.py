from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
import logging
import uuid

from api import companies
from config.settings import DATABASE_URL, get_log_file, get_log_level
from constants import HTTPStatus, REQUEST_ID_HEADER, Routes
from init_db import init_database
from utils.logging_utils import clear_logging_context, configure_logging, set_logging_context

configure_logging(get_log_level(), get_log_file())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info(f"Starting Company Registry API (database: {DATABASE_URL})")
    init_database()
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Company Registry API",
    description="Companies with their employees and registration profiles",
    version="1.0.0",
    lifespan=lifespan
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag every log record emitted while handling a request with its request id."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    set_logging_context(request_id=request_id, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


# Include API routers
app.include_router(companies.router, tags=["companies"])


@app.get(Routes.HEALTH, status_code=HTTPStatus.OK)
def health():
    """Liveness probe"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
