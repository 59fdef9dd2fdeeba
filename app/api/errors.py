import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import ServiceError, StorageError
from app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid input: Ensure the request body is valid JSON."

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error("Failed %s (%s %s)", exc.action, request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected unparseable request body for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
